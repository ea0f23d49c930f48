from typing import Optional, Dict, List, Set

from app.schemas.post import PostOut
from app.schemas.user import UserCreate, UserOut
from app.storage.user.user_interface import IUserRepository
from app.storage.post.post_interface import IPostRepository
from app.storage.like.like_interface import ILikeRepository

from app.core.logx import logger
from app.core.exceptions import UserNotFound, UsernameTakenError

from app.core.security import hash_password


def create_user(user_repo: IUserRepository, user_data: UserCreate, to_dict: bool = True) -> Dict | UserOut:
    """
    注册用户：
    1. 用户名唯一
    2. 对明文密码做 Argon2 哈希
    3. 创建 User 记录（password 存储哈希）
    """
    if user_repo.get_user_by_username(user_data.username):
        raise UsernameTakenError(user_data.username)

    user_data = user_data.model_copy(update={"password": hash_password(user_data.password)})
    new_user = user_repo.create_user(user_data)
    logger.info(f"Created user id={new_user.id}")

    return new_user.model_dump() if to_dict else new_user


def _liked_post_ids(like_repo: ILikeRepository, viewer_uid: Optional[int], post_ids: List[int]) -> Set[int]:
    """访问者在给定帖子中点赞过的帖子 id；匿名访问为空集合"""
    if not viewer_uid:
        return set()
    likes = like_repo.list_likes_by_user_in_posts(viewer_uid, post_ids)
    return {like.post_id for like in likes}


def list_user_posts(user_repo: IUserRepository, post_repo: IPostRepository, like_repo: ILikeRepository, user_id: int, viewer_uid: Optional[int] = None, to_dict: bool = True) -> List[Dict] | List[PostOut]:
    """
    某个用户发布的帖子：
    - 用户不存在抛 UserNotFound（404）；用户存在但没有帖子返回空列表
    - has_liked 按访问者的点赞记录的 post_id 匹配
    """
    user = user_repo.get_user_by_id(user_id)
    if not user:
        raise UserNotFound(message="User not found")

    posts = post_repo.list_posts_by_user(user_id)
    liked = _liked_post_ids(like_repo, viewer_uid, [p.id for p in posts])

    result = [
        PostOut(
            id=post.id,
            image_url=post.image_url,
            caption=post.caption,
            created_at=post.created_at,
            user_id=post.user_id,
            username=post.user.username if post.user else "unknown",
            avatar_url=(post.user.avatar_url or None) if post.user else None,
            has_liked=post.id in liked,
        )
        for post in posts
    ]
    return [p.model_dump() for p in result] if to_dict else result


def list_user_likes(user_repo: IUserRepository, like_repo: ILikeRepository, user_id: int, viewer_uid: Optional[int] = None, to_dict: bool = True) -> List[Dict] | List[PostOut]:
    """
    某个用户点赞过的帖子：
    - id 为点赞记录的 id，图片/配文/时间取自被点赞帖子
    - user_id / username / avatar_url 取自点赞者（不是访问者）
    - 点赞者或帖子关联解析失败的记录直接丢弃
    """
    user = user_repo.get_user_by_id(user_id)
    if not user:
        raise UserNotFound(message="User not found")

    likes = like_repo.list_likes_by_user(user_id)
    resolved = []
    for like in likes:
        if like.user is None or like.post is None:
            logger.warning(f"Dropping like entry {like.id}: user or post not found")
            continue
        resolved.append(like)

    liked = _liked_post_ids(like_repo, viewer_uid, [like.post_id for like in resolved])

    result = [
        PostOut(
            id=like.id,
            image_url=like.post.image_url,
            caption=like.post.caption,
            created_at=like.post.created_at,
            user_id=like.user_id,
            username=like.user.username,
            avatar_url=like.user.avatar_url or None,
            has_liked=like.post_id in liked,
        )
        for like in resolved
    ]
    return [p.model_dump() for p in result] if to_dict else result
