from typing import List, Protocol

from app.schemas.post import PostWithUserOut


class IPostRepository(Protocol):
    """
    帖子仓库接口协议（数据层抽象接口）
    """

    def list_posts_by_user(self, user_id: int) -> List[PostWithUserOut]:
        """
        查询某个用户发布的全部帖子，带上作者信息
        - 作者关联解析失败时 user 为 None
        """
        ...
