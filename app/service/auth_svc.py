from typing import Dict

from app.schemas.auth import LoginIn, TokenOut
from app.storage.user.user_interface import IUserRepository
from app.core.exceptions import InvalidCredentialsError
from app.core.security import verify_password, create_access_token
from app.core.logx import logger


def login(user_repo: IUserRepository, data: LoginIn, to_dict: bool = True) -> Dict | TokenOut:
    """
    用户名 + 密码登录，成功返回 access token
    - 用户不存在和密码错误返回同一个错误，避免暴露用户名是否存在
    """
    user = user_repo.get_user_by_username(data.username)
    if not user or not verify_password(data.password, user.password):
        raise InvalidCredentialsError()

    token = TokenOut(access_token=create_access_token(user.id))
    logger.info(f"User {user.id} logged in")
    return token.model_dump() if to_dict else token
