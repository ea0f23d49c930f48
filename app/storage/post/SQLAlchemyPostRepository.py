from typing import List

from sqlalchemy.orm import Session, joinedload

from app.models.post import Post
from app.schemas.post import PostWithUserOut
from app.storage.post.post_interface import IPostRepository


class SQLAlchemyPostRepository(IPostRepository):
    """
    使用 SQLAlchemy 实现的帖子仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def list_posts_by_user(self, user_id: int) -> List[PostWithUserOut]:
        posts = (
            self.db.query(Post)
            .options(joinedload(Post.user))
            .filter(Post.user_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )
        return [PostWithUserOut.model_validate(p) for p in posts]
