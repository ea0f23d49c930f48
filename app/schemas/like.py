from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.user import UserOut
from app.schemas.post import PostBaseOut


class LikeOut(BaseModel):
    """
    点赞基础信息
    """
    id: int
    user_id: int
    post_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LikeWithRelationsOut(LikeOut):
    """
    点赞 + 点赞者 + 被点赞帖子
    - 任一关联解析失败时为 None，由业务层决定是否丢弃
    """
    user: Optional[UserOut] = None
    post: Optional[PostBaseOut] = None
