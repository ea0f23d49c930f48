"""
帖子 / 点赞列表与注册的业务逻辑测试（使用内存仓库）
"""
import pytest

from app.core.exceptions import UserNotFound, UsernameTakenError
from app.core.security import verify_password
from app.schemas.user import UserCreate
from app.service import user_svc


class TestUserPosts:

    def test_posts_with_like_flags(self, store, user_repo, post_repo, like_repo):
        owner = store.add_user("owner", avatar_url="http://a/o.png")
        viewer = store.add_user("viewer")
        p10 = store.add_post(owner.id, caption="first")
        p11 = store.add_post(owner.id, caption="second")
        store.add_like(viewer.id, p10.id)

        posts = user_svc.list_user_posts(user_repo, post_repo, like_repo, owner.id, viewer_uid=viewer.id)

        by_id = {p["id"]: p for p in posts}
        assert set(by_id) == {p10.id, p11.id}
        assert by_id[p10.id]["has_liked"] is True
        assert by_id[p11.id]["has_liked"] is False
        assert by_id[p10.id]["username"] == "owner"
        assert by_id[p10.id]["avatar_url"] == "http://a/o.png"
        assert by_id[p10.id]["caption"] == "first"
        assert by_id[p10.id]["user_id"] == owner.id

    def test_has_liked_matches_post_not_like_row(self, store, user_repo, post_repo, like_repo):
        owner = store.add_user("owner")
        viewer = store.add_user("viewer")
        post = store.add_post(owner.id)
        other = store.add_post(owner.id)
        like = store.add_like(viewer.id, post.id)
        assert like.id != post.id

        posts = user_svc.list_user_posts(user_repo, post_repo, like_repo, owner.id, viewer_uid=viewer.id, to_dict=False)

        flags = {p.id: p.has_liked for p in posts}
        assert flags == {post.id: True, other.id: False}

    def test_posts_anonymous(self, store, user_repo, post_repo, like_repo):
        owner = store.add_user("owner")
        post = store.add_post(owner.id)
        store.add_like(owner.id, post.id)

        posts = user_svc.list_user_posts(user_repo, post_repo, like_repo, owner.id)

        assert [p["has_liked"] for p in posts] == [False]

    def test_posts_empty_list_for_existing_user(self, store, user_repo, post_repo, like_repo):
        owner = store.add_user("owner")

        assert user_svc.list_user_posts(user_repo, post_repo, like_repo, owner.id) == []

    def test_posts_missing_user(self, user_repo, post_repo, like_repo):
        with pytest.raises(UserNotFound):
            user_svc.list_user_posts(user_repo, post_repo, like_repo, 123)

    def test_posts_unresolved_owner(self, store, user_repo, post_repo, like_repo):
        owner = store.add_user("owner")
        store.add_post(owner.id)

        class OwnerlessPostRepository:
            def list_posts_by_user(self, user_id):
                return [p.model_copy(update={"user": None}) for p in post_repo.list_posts_by_user(user_id)]

        posts = user_svc.list_user_posts(user_repo, OwnerlessPostRepository(), like_repo, owner.id)

        assert posts[0]["username"] == "unknown"
        assert posts[0]["avatar_url"] is None


class TestUserLikes:

    def test_likes_shape(self, store, user_repo, like_repo):
        author = store.add_user("author")
        liker = store.add_user("liker", avatar_url="http://a/l.png")
        post = store.add_post(author.id, image_url="http://img/p.png", caption="nice")
        like = store.add_like(liker.id, post.id)

        likes = user_svc.list_user_likes(user_repo, like_repo, liker.id)

        assert likes == [{
            "id": like.id,
            "image_url": "http://img/p.png",
            "caption": "nice",
            "created_at": post.created_at,
            "user_id": liker.id,
            "username": "liker",
            "avatar_url": "http://a/l.png",
            "has_liked": False,
        }]

    def test_likes_viewer_flags(self, store, user_repo, like_repo):
        author = store.add_user("author")
        liker = store.add_user("liker")
        viewer = store.add_user("viewer")
        p1 = store.add_post(author.id)
        p2 = store.add_post(author.id)
        l1 = store.add_like(liker.id, p1.id)
        l2 = store.add_like(liker.id, p2.id)
        store.add_like(viewer.id, p2.id)

        likes = user_svc.list_user_likes(user_repo, like_repo, liker.id, viewer_uid=viewer.id)

        flags = {item["id"]: item["has_liked"] for item in likes}
        assert flags == {l1.id: False, l2.id: True}

    def test_likes_drop_unresolved(self, store, user_repo, like_repo):
        author = store.add_user("author")
        liker = store.add_user("liker")
        post = store.add_post(author.id)
        kept = store.add_like(liker.id, post.id)
        store.add_like(liker.id, 9999)

        likes = user_svc.list_user_likes(user_repo, like_repo, liker.id)

        assert [item["id"] for item in likes] == [kept.id]

    def test_likes_empty_list_for_existing_user(self, store, user_repo, like_repo):
        liker = store.add_user("liker")

        assert user_svc.list_user_likes(user_repo, like_repo, liker.id) == []

    def test_likes_missing_user(self, user_repo, like_repo):
        with pytest.raises(UserNotFound):
            user_svc.list_user_likes(user_repo, like_repo, 5)


class TestCreateUser:

    def test_password_is_hashed(self, store, user_repo):
        created = user_svc.create_user(user_repo, UserCreate(username="alice", password="pw"))

        assert "password" not in created
        stored = user_repo.get_user_by_username("alice")
        assert stored.password != "pw"
        assert verify_password("pw", stored.password)

    def test_duplicate_username(self, store, user_repo):
        store.add_user("alice")

        with pytest.raises(UsernameTakenError) as exc:
            user_svc.create_user(user_repo, UserCreate(username="alice", password="pw"))
        assert exc.value.status_code == 409


class TestEmptyAvatar:

    def test_posts_empty_avatar_becomes_none(self, store, user_repo, post_repo, like_repo):
        owner = store.add_user("owner", avatar_url="")
        store.add_post(owner.id)

        posts = user_svc.list_user_posts(user_repo, post_repo, like_repo, owner.id)

        assert posts[0]["avatar_url"] is None

    def test_likes_empty_avatar_becomes_none(self, store, user_repo, like_repo):
        author = store.add_user("author")
        liker = store.add_user("liker", avatar_url="")
        post = store.add_post(author.id)
        store.add_like(liker.id, post.id)

        likes = user_svc.list_user_likes(user_repo, like_repo, liker.id)

        assert likes[0]["avatar_url"] is None
