import os

# 必须在导入 app 之前设置，避免测试时去连 MySQL
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import hash_password
from app.main import app
from app.models import Base, User, Follow, Post, Like
from app.storage.database import get_db
from tests.fakes import (
    FakeStore,
    FakeUserRepository,
    FakeFollowRepository,
    FakePostRepository,
    FakeLikeRepository,
)


# ---------------- 业务层：内存仓库 ----------------

@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def user_repo(store):
    return FakeUserRepository(store)


@pytest.fixture
def follow_repo(store):
    return FakeFollowRepository(store)


@pytest.fixture
def post_repo(store):
    return FakePostRepository(store)


@pytest.fixture
def like_repo(store):
    return FakeLikeRepository(store)


# ---------------- 接口层：SQLite 内存库 ----------------

@pytest.fixture
def engine():
    # StaticPool 保证 TestClient 的工作线程和测试代码用的是同一个内存库
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(username: str, password: str = "secret", bio=None, avatar_url=None) -> User:
        user = User(
            username=username,
            password=hash_password(password),
            bio=bio,
            avatar_url=avatar_url,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_follow(db_session):
    def _make_follow(follower_id: int, followed_id: int) -> Follow:
        follow = Follow(follower_id=follower_id, followed_id=followed_id)
        db_session.add(follow)
        db_session.commit()
        db_session.refresh(follow)
        return follow
    return _make_follow


@pytest.fixture
def make_post(db_session):
    def _make_post(user_id: int, image_url: str = "http://img/1.png", caption=None) -> Post:
        post = Post(user_id=user_id, image_url=image_url, caption=caption)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post
    return _make_post


@pytest.fixture
def make_like(db_session):
    def _make_like(user_id: int, post_id: int) -> Like:
        like = Like(user_id=user_id, post_id=post_id)
        db_session.add(like)
        db_session.commit()
        db_session.refresh(like)
        return like
    return _make_like
