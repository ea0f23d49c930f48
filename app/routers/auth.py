from fastapi import APIRouter, Depends

from app.schemas.auth import LoginIn
from app.schemas.user import UserCreate

from app.core.biz_response import BizResponse
from app.core.exceptions import Conflict, InvalidCredentialsError
from app.service import auth_svc, user_svc
from app.storage.database import get_user_repo
from app.storage.user.user_interface import IUserRepository

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register")
def register(user: UserCreate, user_repo: IUserRepository = Depends(get_user_repo)):
    """
    注册：用户名被占用返回 409
    """
    try:
        new_user = user_svc.create_user(user_repo=user_repo, user_data=user)
        return BizResponse(data=new_user)
    except Conflict as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@auth_router.post("/login")
def login(data: LoginIn, user_repo: IUserRepository = Depends(get_user_repo)):
    """
    登录：返回 bearer token，用户名或密码错误返回 401
    """
    try:
        token = auth_svc.login(user_repo=user_repo, data=data)
        return BizResponse(data=token)
    except InvalidCredentialsError as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)
