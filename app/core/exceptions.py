# domain_exceptions.py
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.biz_response import BizResponse
from app.core.logx import logger


class DomainError(Exception):
    """业务异常基类：status_code 由接口层直接映射为 HTTP 状态码"""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequest(DomainError):
    """请求在语义上不合法（400）"""
    status_code = 400


class NotFound(DomainError):
    """引用的实体或关系不存在（404）"""
    status_code = 404


class Conflict(DomainError):
    """违反唯一性约束（409）"""
    status_code = 409


class UserNotFound(NotFound):
    """
    在需要用户存在的场景下未找到对应用户时抛出：
    - 例如 get_user_profile / list_user_posts 等
    """

    def __init__(self, user_id: Optional[int] = None, message: Optional[str] = None):
        if message:
            super().__init__(message)
        elif user_id is not None:
            super().__init__(f"User {user_id} not found.")
        else:
            super().__init__("User not found.")


class FollowYourselfError(InvalidRequest):
    """
    尝试关注自己时抛出：
    - current_uid == target_uid
    """

    def __init__(self, message: str = "You cannot follow yourself."):
        super().__init__(message)


class AlreadyFollowingError(Conflict):
    """
    重复关注同一个用户时抛出：
    - 业务上不做“幂等返回”，而是明确提示已经关注
    """

    def __init__(
        self,
        user_id: Optional[int] = None,
        target_id: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.user_id = user_id
        self.target_id = target_id
        super().__init__(message or "You are already following this user.")


class NotFollowingError(NotFound):
    """
    取消关注时没有删掉任何记录：
    - 不区分“从未关注”和“已经取消过”
    """

    def __init__(
        self,
        user_id: Optional[int] = None,
        target_id: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.user_id = user_id
        self.target_id = target_id
        super().__init__(message or "Follow relationship not found.")


class NoFollowersFound(NotFound):
    """粉丝列表为空（列表接口把空结果视为 404）"""

    def __init__(self, message: str = "No followers found for this user."):
        super().__init__(message)


class NoFollowingFound(NotFound):
    """关注列表为空"""

    def __init__(self, message: str = "No following found for this user."):
        super().__init__(message)


class UsernameTakenError(Conflict):
    """注册时用户名已被占用"""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' is already taken.")


class InvalidCredentialsError(DomainError):
    """登录失败：用户名不存在或密码错误（401）"""
    status_code = 401

    def __init__(self, message: str = "Incorrect username or password."):
        super().__init__(message)


# ---------------- 框架层异常 -> 统一返回结构 ----------------

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> BizResponse:
    """401 / 404 路由不存在等框架抛出的 HTTPException，也包成 {code, msg, data}"""
    logger.warning(f"HTTP error on {request.url}: {exc.status_code} {exc.detail}")
    return BizResponse(data=None, msg=str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> BizResponse:
    """参数校验失败（422），data 中带上具体错误"""
    errors = exc.errors()
    # ctx 里可能带异常对象，无法序列化
    for error in errors:
        ctx = error.get("ctx")
        if ctx and isinstance(ctx.get("error"), Exception):
            ctx["error"] = str(ctx["error"])
    logger.warning(f"Validation error on {request.url}: {errors}")
    return BizResponse(data=errors, msg="Validation failed. Please check your request data.", status_code=422)
