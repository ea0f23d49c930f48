from sqlalchemy import Column, Integer, String, TIMESTAMP, Text
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc


class User(Base):
    """ 用户模型，对应数据库中的 users 表。

        CREATE TABLE IF NOT EXISTS users (
            id INT AUTO_INCREMENT PRIMARY KEY,                -- 用户 ID（对外暴露）
            username VARCHAR(100) UNIQUE NOT NULL,           -- 用户名
            password VARCHAR(255) NOT NULL,                  -- 密码（Argon2 哈希）
            bio TEXT,                                        -- 用户简介
            avatar_url VARCHAR(255),                         -- 用户头像 URL
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP   -- 创建时间
        );
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)  # 用户名
    password = Column(String(255), nullable=False)  # 密码哈希
    bio = Column(Text, nullable=True)  # 用户简介
    avatar_url = Column(String(255), nullable=True)  # 用户头像
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)  # 创建时间

    # 该用户的所有帖子
    posts = relationship("Post", back_populates="user")
    # 该用户的所有点赞记录
    likes = relationship("Like", back_populates="user")
    # 我关注的人（关注者是我 -> 多个 Follow 记录）
    followings = relationship("Follow", foreign_keys="Follow.follower_id", back_populates="follower")
    # 我的粉丝（被关注者是我 -> 多个 Follow 记录）
    followers = relationship("Follow", foreign_keys="Follow.followed_id", back_populates="followed")
