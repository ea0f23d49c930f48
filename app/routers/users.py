from typing import Optional

from fastapi import APIRouter, Depends

from app.core.biz_response import BizResponse
from app.core.security import get_current_uid, get_optional_uid
from app.service import follow_svc, user_svc

from app.storage.database import (
    get_user_repo,
    get_follow_repo,
    get_post_repo,
    get_like_repo,
)
from app.storage.user.user_interface import IUserRepository
from app.storage.follow.follow_interface import IFollowRepository
from app.storage.post.post_interface import IPostRepository
from app.storage.like.like_interface import ILikeRepository

from app.core.exceptions import InvalidRequest, NotFound, Conflict

users_router = APIRouter(prefix="/users", tags=["Users & Follows"])


@users_router.post("/{user_id}/follow")
def follow_user(user_id: int, current_uid: int = Depends(get_current_uid), follow_repo: IFollowRepository = Depends(get_follow_repo), user_repo: IUserRepository = Depends(get_user_repo),):
    """
    关注用户（需要登录）：
    - 400 关注自己 / 404 用户不存在 / 409 已经关注
    """
    try:
        result = follow_svc.follow_user(
            follow_repo=follow_repo,
            user_repo=user_repo,
            current_uid=current_uid,
            target_uid=user_id,
        )
        return BizResponse(data=result)
    except (InvalidRequest, NotFound, Conflict) as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@users_router.delete("/{user_id}/unfollow")
def unfollow_user(user_id: int, current_uid: int = Depends(get_current_uid), follow_repo: IFollowRepository = Depends(get_follow_repo),):
    """
    取消关注（需要登录）：没有这条关注关系返回 404
    """
    try:
        result = follow_svc.unfollow_user(
            follow_repo=follow_repo,
            current_uid=current_uid,
            target_uid=user_id,
        )
        return BizResponse(data=result)
    except NotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@users_router.get("/{user_id}/profile")
def get_user_profile(user_id: int, viewer_uid: Optional[int] = Depends(get_optional_uid), follow_repo: IFollowRepository = Depends(get_follow_repo), user_repo: IUserRepository = Depends(get_user_repo),):
    """
    用户主页（可匿名访问）：基础信息 + 关注数/粉丝数 + 当前访问者是否已关注
    """
    try:
        profile = follow_svc.get_user_profile(
            follow_repo=follow_repo,
            user_repo=user_repo,
            user_id=user_id,
            viewer_uid=viewer_uid,
        )
        return BizResponse(data=profile)
    except NotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@users_router.get("/{user_id}/followers")
def list_followers(user_id: int, follow_repo: IFollowRepository = Depends(get_follow_repo)):
    """
    粉丝列表（空列表返回 404）
    """
    try:
        result = follow_svc.list_followers(follow_repo=follow_repo, user_id=user_id)
        return BizResponse(data=result)
    except NotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@users_router.get("/{user_id}/following")
def list_following(user_id: int, follow_repo: IFollowRepository = Depends(get_follow_repo)):
    """
    关注列表（空列表返回 404）
    """
    try:
        result = follow_svc.list_following(follow_repo=follow_repo, user_id=user_id)
        return BizResponse(data=result)
    except NotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@users_router.get("/{user_id}/posts")
def list_user_posts(user_id: int, viewer_uid: Optional[int] = Depends(get_optional_uid), user_repo: IUserRepository = Depends(get_user_repo), post_repo: IPostRepository = Depends(get_post_repo), like_repo: ILikeRepository = Depends(get_like_repo),):
    """
    用户发布的帖子（可匿名访问）：用户存在但没有帖子时返回空列表
    """
    try:
        result = user_svc.list_user_posts(
            user_repo=user_repo,
            post_repo=post_repo,
            like_repo=like_repo,
            user_id=user_id,
            viewer_uid=viewer_uid,
        )
        return BizResponse(data=result)
    except NotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)


@users_router.get("/{user_id}/likes")
def list_user_likes(user_id: int, viewer_uid: Optional[int] = Depends(get_optional_uid), user_repo: IUserRepository = Depends(get_user_repo), like_repo: ILikeRepository = Depends(get_like_repo),):
    """
    用户点赞过的帖子（可匿名访问）
    """
    try:
        result = user_svc.list_user_likes(
            user_repo=user_repo,
            like_repo=like_repo,
            user_id=user_id,
            viewer_uid=viewer_uid,
        )
        return BizResponse(data=result)
    except NotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=e.status_code)
