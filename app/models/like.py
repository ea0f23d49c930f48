from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc


class Like(Base):
    """ 点赞模型，对应数据库中的 likes 表。

        CREATE TABLE IF NOT EXISTS likes (
            id INT AUTO_INCREMENT PRIMARY KEY,
            user_id INT NOT NULL,                            -- 点赞用户 ID (FK -> users.id)
            post_id INT NOT NULL,                            -- 被点赞帖子 ID (FK -> posts.id)
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,

            CONSTRAINT uq_likes_user_post UNIQUE (user_id, post_id)
        );
        CREATE INDEX idx_likes_post_id ON likes (post_id);
    """

    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)

    # 点赞的用户
    user = relationship("User", back_populates="likes")
    # 被点赞的帖子
    post = relationship("Post", back_populates="likes")

    __table_args__ = (
        # 每个用户对同一帖子只能点赞一次
        UniqueConstraint("user_id", "post_id", name="uq_likes_user_post"),
        Index("idx_likes_post_id", "post_id"),
    )
