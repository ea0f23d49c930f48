from typing import List

from sqlalchemy.orm import Session, joinedload

from app.models.follow import Follow
from app.schemas.follow import (
    FollowCreate,
    FollowCancel,
    FollowOut,
    FollowWithFollowerOut,
    FollowWithFollowedOut,
)
from app.storage.follow.follow_interface import IFollowRepository
from app.core.db import transaction


class SQLAlchemyFollowRepository(IFollowRepository):
    """
    使用 SQLAlchemy 实现的关注关系仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def _pair_query(self, follower_id: int, followed_id: int):
        return self.db.query(Follow).filter(
            Follow.follower_id == follower_id,
            Follow.followed_id == followed_id,
        )

    def create_follow(self, data: FollowCreate) -> FollowOut:
        follow = Follow(
            follower_id=data.follower_id,
            followed_id=data.followed_id,
        )
        with transaction(self.db):
            self.db.add(follow)

        self.db.refresh(follow)
        return FollowOut.model_validate(follow)

    def delete_follow(self, data: FollowCancel) -> int:
        """
        硬删除关注记录，返回删除条数（0 表示本来就没有这条关系）
        """
        with transaction(self.db):
            affected = (
                self._pair_query(data.follower_id, data.followed_id)
                .delete(synchronize_session=False)
            )
        return affected

    def is_following(self, follower_id: int, followed_id: int) -> bool:
        return self._pair_query(follower_id, followed_id).first() is not None

    def count_followers(self, user_id: int) -> int:
        return self.db.query(Follow).filter(Follow.followed_id == user_id).count()

    def count_following(self, user_id: int) -> int:
        return self.db.query(Follow).filter(Follow.follower_id == user_id).count()

    def list_followers(self, user_id: int) -> List[FollowWithFollowerOut]:
        """
        我的粉丝列表：
        - 从 Follow 中找出 followed_id = user_id 的记录
        - 外连接加载关注者（joinedload 默认 LEFT OUTER JOIN），关注者缺失时为 None
        """
        rows = (
            self.db.query(Follow)
            .options(joinedload(Follow.follower))
            .filter(Follow.followed_id == user_id)
            .order_by(Follow.created_at.desc(), Follow.id.desc())
            .all()
        )
        return [FollowWithFollowerOut.model_validate(f) for f in rows]

    def list_following(self, user_id: int) -> List[FollowWithFollowedOut]:
        """
        我关注的人列表：follower_id = user_id，外连接加载被关注者
        """
        rows = (
            self.db.query(Follow)
            .options(joinedload(Follow.followed))
            .filter(Follow.follower_id == user_id)
            .order_by(Follow.created_at.desc(), Follow.id.desc())
            .all()
        )
        return [FollowWithFollowedOut.model_validate(f) for f in rows]
