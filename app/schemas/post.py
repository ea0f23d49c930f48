from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from app.schemas.user import UserOut


class PostBaseOut(BaseModel):
    id: int
    user_id: int
    image_url: str
    caption: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostWithUserOut(PostBaseOut):
    """
    帖子 + 作者信息（作者关联可能解析失败，为 None）
    """
    user: Optional[UserOut] = None


class PostOut(BaseModel):
    """
    对外返回的帖子条目：
    - username / avatar_url 取自作者（点赞列表中取自点赞者）
    - has_liked 表示当前访问者是否点赞过该帖子
    """
    id: int
    image_url: str
    caption: Optional[str] = None
    created_at: Optional[datetime] = None
    user_id: int
    username: str
    avatar_url: Optional[str] = None
    has_liked: bool = False

    model_config = ConfigDict(from_attributes=True)
