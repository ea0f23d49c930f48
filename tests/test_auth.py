"""
注册 / 登录 / token 依赖测试
"""
from datetime import timedelta

from app.core.security import create_access_token, decode_access_token, hash_password, verify_password
from tests.utils import auth_headers


class TestPasswordHashing:

    def test_hash_and_verify(self):
        hashed = hash_password("s3cret")

        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_verify_against_garbage_hash(self):
        assert not verify_password("s3cret", "not-a-hash")


class TestTokens:

    def test_token_round_trip(self):
        assert decode_access_token(create_access_token(42)) == 42


class TestAuthAPI:

    def test_register_and_login(self, client):
        response = client.post("/auth/register", json={"username": "alice", "password": "pw", "bio": "hello"})

        assert response.status_code == 200
        user = response.json()["data"]
        assert user["username"] == "alice"
        assert user["bio"] == "hello"
        assert "password" not in user

        response = client.post("/auth/login", json={"username": "alice", "password": "pw"})

        assert response.status_code == 200
        token = response.json()["data"]
        assert token["token_type"] == "bearer"
        assert decode_access_token(token["access_token"]) == user["id"]

    def test_register_duplicate_username(self, client, make_user):
        make_user("alice")

        response = client.post("/auth/register", json={"username": "alice", "password": "pw"})

        assert response.status_code == 409
        assert response.json()["data"] is None

    def test_login_wrong_password(self, client, make_user):
        make_user("alice", password="right")

        response = client.post("/auth/login", json={"username": "alice", "password": "wrong"})

        assert response.status_code == 401

    def test_login_unknown_user(self, client):
        response = client.post("/auth/login", json={"username": "ghost", "password": "pw"})

        assert response.status_code == 401

    def test_required_auth_without_token(self, client, make_user):
        bob = make_user("bob")

        response = client.post(f"/users/{bob.id}/follow")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {"code": 401, "msg": "Not authenticated", "data": None}

    def test_required_auth_with_expired_token(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        token = create_access_token(alice.id, expires_delta=timedelta(minutes=-5))

        response = client.post(f"/users/{bob.id}/follow", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_optional_auth_with_bad_token_is_anonymous(self, client, make_user, make_follow):
        alice = make_user("alice")
        bob = make_user("bob")
        make_follow(alice.id, bob.id)

        response = client.get(f"/users/{bob.id}/profile", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 200
        assert response.json()["data"]["has_followed"] is False

    def test_optional_auth_with_valid_token(self, client, make_user, make_follow):
        alice = make_user("alice")
        bob = make_user("bob")
        make_follow(alice.id, bob.id)

        response = client.get(f"/users/{bob.id}/profile", headers=auth_headers(alice.id))

        assert response.json()["data"]["has_followed"] is True

    def test_required_auth_with_non_bearer_scheme(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        token = create_access_token(alice.id)

        response = client.post(f"/users/{bob.id}/follow", headers={"Authorization": f"Token {token}"})

        assert response.status_code == 401

    def test_openapi_uses_http_bearer(self, client):
        schemes = client.get("/openapi.json").json()["components"]["securitySchemes"]

        assert schemes == {"HTTPBearer": {"type": "http", "scheme": "bearer"}}
