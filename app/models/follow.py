from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc


class Follow(Base):
    """ 用户关注关系表（有向边：follower -> followed）

        CREATE TABLE IF NOT EXISTS follows (
            id INT AUTO_INCREMENT PRIMARY KEY,               -- 系统主键（自增）
            follower_id INT NOT NULL,                        -- 关注者ID (FK -> users.id)
            followed_id INT NOT NULL,                        -- 被关注者ID (FK -> users.id)
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,  -- 创建时间

            CONSTRAINT fk_follow_follower FOREIGN KEY (follower_id) REFERENCES users(id),
            CONSTRAINT fk_follow_followed FOREIGN KEY (followed_id) REFERENCES users(id),

            CONSTRAINT uq_follow_pair UNIQUE (follower_id, followed_id)    -- 防止并发下重复关注
        );

        CREATE INDEX idx_follow_follower ON follows (follower_id);
        CREATE INDEX idx_follow_followed ON follows (followed_id);
    """

    __tablename__ = "follows"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 关注者ID
    follower_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # 被关注者ID
    followed_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)

    follower = relationship("User", foreign_keys=[follower_id], back_populates="followings")
    followed = relationship("User", foreign_keys=[followed_id], back_populates="followers")

    __table_args__ = (
        # 唯一约束由存储层保证，业务层的“先查后插”在并发下不可靠
        UniqueConstraint("follower_id", "followed_id", name="uq_follow_pair"),
        Index("idx_follow_follower", "follower_id"),
        Index("idx_follow_followed", "followed_id"),
    )
