from app.core.security import create_access_token


def auth_headers(user_id: int) -> dict:
    """构造携带 bearer token 的请求头"""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}
