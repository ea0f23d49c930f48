# app/storage/like/SQLAlchemyLikeRepository.py

from typing import List, Iterable

from sqlalchemy.orm import Session, joinedload

from app.models.like import Like
from app.schemas.like import LikeOut, LikeWithRelationsOut
from app.storage.like.like_interface import ILikeRepository


class SQLAlchemyLikeRepository(ILikeRepository):
    """
    使用 SQLAlchemy 实现的点赞仓库
    业务层依赖 ILikeRepository 接口，而不是这个具体实现
    """

    def __init__(self, db: Session):
        self.db = db

    def list_likes_by_user(self, user_id: int) -> List[LikeWithRelationsOut]:
        likes = (
            self.db.query(Like)
            .options(
                joinedload(Like.user),
                joinedload(Like.post),
            )
            .filter(Like.user_id == user_id)
            .order_by(Like.created_at.desc(), Like.id.desc())
            .all()
        )
        return [LikeWithRelationsOut.model_validate(like) for like in likes]

    def list_likes_by_user_in_posts(self, user_id: int, post_ids: Iterable[int]) -> List[LikeOut]:
        post_ids = list(post_ids)
        # IN () 在部分数据库上是语法错误
        if not post_ids:
            return []
        likes = (
            self.db.query(Like)
            .filter(
                Like.user_id == user_id,
                Like.post_id.in_(post_ids),
            )
            .all()
        )
        return [LikeOut.model_validate(like) for like in likes]
