# 导入所有模型，保证 Base.metadata 中注册了全部表
from app.models.base import Base
from app.models.user import User
from app.models.follow import Follow
from app.models.post import Post
from app.models.like import Like
