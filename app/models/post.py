from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc


class Post(Base):
    """ 帖子表

        CREATE TABLE IF NOT EXISTS posts (
            id INT AUTO_INCREMENT PRIMARY KEY,
            user_id INT NOT NULL,                            -- 作者 ID (FK -> users.id)
            image_url VARCHAR(255) NOT NULL,                 -- 图片地址
            caption TEXT,                                    -- 配文
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,

            FOREIGN KEY (user_id) REFERENCES users(id)
        );

        CREATE INDEX idx_posts_user_id ON posts (user_id);
    """

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)  # 帖子作者 ID
    image_url = Column(String(255), nullable=False)
    caption = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)

    # 帖子作者
    user = relationship("User", back_populates="posts")
    likes = relationship("Like", back_populates="post")

    __table_args__ = (
        Index("idx_posts_user_id", "user_id"),
    )
