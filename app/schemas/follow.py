from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from app.schemas.user import UserOut


class FollowCreate(BaseModel):
    """
    创建关注
    """
    follower_id: int           # 关注者 ID（来自 token）
    followed_id: int           # 被关注者 ID

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class FollowCancel(BaseModel):
    """
    取消关注（硬删除）
    """
    follower_id: int
    followed_id: int

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class FollowOut(BaseModel):
    """
    单条关注关系
    """
    id: int
    follower_id: int
    followed_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FollowWithFollowerOut(FollowOut):
    """
    粉丝列表用：关注记录 + 关注者信息
    - follower 为 None 说明关注记录引用的用户已不存在
    """
    follower: Optional[UserOut] = None


class FollowWithFollowedOut(FollowOut):
    """
    关注列表用：关注记录 + 被关注者信息
    """
    followed: Optional[UserOut] = None
