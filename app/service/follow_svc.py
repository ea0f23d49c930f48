from typing import Dict, List, Optional

from app.schemas.follow import FollowCreate, FollowCancel
from app.schemas.user import UserOut, UserProfileOut
from app.storage.user.user_interface import IUserRepository
from app.storage.follow.follow_interface import IFollowRepository

from app.core.logx import logger
from app.core.exceptions import (
    UserNotFound,
    FollowYourselfError,
    AlreadyFollowingError,
    NotFollowingError,
    NoFollowersFound,
    NoFollowingFound,
)


def follow_user(follow_repo: IFollowRepository, user_repo: IUserRepository, current_uid: int, target_uid: int) -> Dict:
    """
    关注用户：
    1. 禁止关注自己（先于存在性检查，关注自己无论用户是否存在都是 400）
    2. 检查被关注用户是否存在
    3. 已关注则抛 AlreadyFollowingError（409）
    4. 创建 Follow 记录

    步骤 3 是“先查后插”，并发下可能同时通过，最终由表上的唯一约束兜底
    """
    if current_uid == target_uid:
        raise FollowYourselfError()

    target_user = user_repo.get_user_by_id(target_uid)
    if not target_user:
        raise UserNotFound(message="User to follow not found.")

    if follow_repo.is_following(current_uid, target_uid):
        raise AlreadyFollowingError(current_uid, target_uid)

    follow_repo.create_follow(
        FollowCreate(follower_id=current_uid, followed_id=target_uid)
    )
    logger.info(f"User {current_uid} followed user {target_uid}")

    return {"message": f"Successfully followed user {target_uid}"}


def unfollow_user(follow_repo: IFollowRepository, current_uid: int, target_uid: int) -> Dict:
    """
    取消关注：
    - 直接按 (current_uid, target_uid) 删除
    - 没有删掉任何记录则抛 NotFollowingError（404），所以连续取消两次第二次是 404
    """
    affected = follow_repo.delete_follow(
        FollowCancel(follower_id=current_uid, followed_id=target_uid)
    )
    if affected == 0:
        raise NotFollowingError(current_uid, target_uid)

    logger.info(f"User {current_uid} unfollowed user {target_uid}")
    return {"message": f"Successfully unfollowed user {target_uid}"}


def get_user_profile(follow_repo: IFollowRepository, user_repo: IUserRepository, user_id: int, viewer_uid: Optional[int] = None, to_dict: bool = True) -> Dict | UserProfileOut:
    """
    用户主页：
    - 基础信息 + 粉丝数 + 关注数
    - has_followed：访问者已登录且关注了该用户才为 True，匿名访问为 False
    """
    user = user_repo.get_user_by_id(user_id)
    if not user:
        raise UserNotFound(message="User not found")

    followers = follow_repo.count_followers(user_id)
    following = follow_repo.count_following(user_id)
    has_followed = bool(viewer_uid) and follow_repo.is_following(viewer_uid, user_id)

    profile = UserProfileOut(
        **user.model_dump(),
        followers=followers,
        following=following,
        has_followed=has_followed,
    )
    return profile.model_dump() if to_dict else profile


def _placeholder_profile(user: UserOut) -> UserProfileOut:
    # 列表中不计算二级统计
    return UserProfileOut(**user.model_dump(), followers=0, following=0, has_followed=False)


def list_followers(follow_repo: IFollowRepository, user_id: int, to_dict: bool = True) -> List[Dict] | List[UserProfileOut]:
    """
    粉丝列表：
    - 没有任何关注记录时抛 NoFollowersFound（404）
    - 关注者已不存在的记录记日志后丢弃，不影响整个请求
    """
    follows = follow_repo.list_followers(user_id)
    if not follows:
        raise NoFollowersFound()

    profiles: List[UserProfileOut] = []
    for follow in follows:
        if follow.follower is None:
            logger.warning(f"Follower not found for follow entry with ID {follow.id}")
            continue
        profiles.append(_placeholder_profile(follow.follower))

    return [p.model_dump() for p in profiles] if to_dict else profiles


def list_following(follow_repo: IFollowRepository, user_id: int, to_dict: bool = True) -> List[Dict] | List[UserProfileOut]:
    """
    关注列表：与粉丝列表对称
    """
    follows = follow_repo.list_following(user_id)
    if not follows:
        raise NoFollowingFound()

    profiles: List[UserProfileOut] = []
    for follow in follows:
        if follow.followed is None:
            logger.warning(f"Followed user not found for follow entry with ID {follow.id}")
            continue
        profiles.append(_placeholder_profile(follow.followed))

    return [p.model_dump() for p in profiles] if to_dict else profiles
