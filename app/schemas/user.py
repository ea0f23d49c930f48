from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """
    注册用户（账号密码注册）
    """
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    bio: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class UserOut(BaseModel):
    """
    对外返回的用户基础信息（不包含 password）
    """
    id: int
    username: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserAllOut(UserOut):
    """
    包含密码哈希，仅供登录校验使用，不对外返回
    """
    password: str


class UserProfileOut(UserOut):
    """
    用户主页：基础信息 + 关注数/粉丝数 + 当前访问者是否已关注
    - 关注/粉丝列表中复用该结构，统计字段固定为 0 / False
    """
    followers: int = 0
    following: int = 0
    has_followed: bool = False
