from typing import List, Protocol

from app.schemas.follow import (
    FollowCreate,
    FollowCancel,
    FollowOut,
    FollowWithFollowerOut,
    FollowWithFollowedOut,
)


class IFollowRepository(Protocol):
    """
    关注关系仓库接口协议（数据层抽象接口）
    业务层只依赖本接口，不依赖具体 SQLAlchemy 实现
    """

    def create_follow(self, data: FollowCreate) -> FollowOut:
        """
        创建关注关系
        - 是否已关注由业务层先检查；(follower_id, followed_id) 的唯一性由存储层约束保证
        """
        ...

    def delete_follow(self, data: FollowCancel) -> int:
        """
        删除关注关系（硬删除），返回受影响的行数
        """
        ...

    def is_following(self, follower_id: int, followed_id: int) -> bool:
        """判断 follower_id 是否正在关注 followed_id"""
        ...

    def count_followers(self, user_id: int) -> int:
        """粉丝数：followed_id = user_id 的记录数"""
        ...

    def count_following(self, user_id: int) -> int:
        """关注数：follower_id = user_id 的记录数"""
        ...

    def list_followers(self, user_id: int) -> List[FollowWithFollowerOut]:
        """
        粉丝列表：followed_id = user_id 的全部记录，带上关注者信息
        - 关注者不存在时 follower 为 None
        """
        ...

    def list_following(self, user_id: int) -> List[FollowWithFollowedOut]:
        """
        关注列表：follower_id = user_id 的全部记录，带上被关注者信息
        """
        ...
