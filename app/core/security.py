from datetime import datetime, timedelta, timezone
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.core.config import settings

# 可以全局复用一个实例
pwd_hasher = PasswordHasher()

# token 由 POST /auth/login 签发；auto_error=False：没有 token 时不直接 401，交给具体依赖决定（必须登录 / 可选登录）
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(plain_password: str) -> str:
    """
    使用 Argon2 对明文密码进行哈希
    """
    return pwd_hasher.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    校验明文密码是否匹配哈希
    """
    try:
        pwd_hasher.verify(hashed_password, plain_password)
        return True
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    解析 token，返回其中的用户 id
    - 签名错误 / 过期 / sub 不是整数，统一抛 JWTError
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise JWTError("Invalid subject in token")


def get_current_uid(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> int:
    """必须登录：没有 token 或 token 无效返回 401"""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(credentials.credentials)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_optional_uid(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> Optional[int]:
    """可选登录：没有 token 或 token 无效都按匿名访问处理"""
    if not credentials:
        return None
    try:
        return decode_access_token(credentials.credentials)
    except JWTError:
        return None
