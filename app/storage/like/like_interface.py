# app/storage/like/like_interface.py

from typing import List, Protocol, Iterable

from app.schemas.like import LikeOut, LikeWithRelationsOut


class ILikeRepository(Protocol):
    """
    点赞仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现
    """

    def list_likes_by_user(self, user_id: int) -> List[LikeWithRelationsOut]:
        """
        查询某个用户的全部点赞记录，带上点赞者和被点赞帖子
        - 关联解析失败时 user / post 为 None
        """
        ...

    def list_likes_by_user_in_posts(self, user_id: int, post_ids: Iterable[int]) -> List[LikeOut]:
        """
        查询某个用户在给定帖子集合中的点赞记录
        - post_ids 为空时直接返回空列表
        """
        ...
