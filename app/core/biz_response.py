from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class BizResponse(JSONResponse):
    """
    统一的接口返回结构：
    {"code": 200, "msg": "ok", "data": ...}
    - code 与 HTTP 状态码保持一致
    """

    def __init__(self, data: Any = None, msg: str = "ok", status_code: int = 200, **kwargs):
        content = {
            "code": status_code,
            "msg": msg,
            "data": jsonable_encoder(data),
        }
        super().__init__(content=content, status_code=status_code, **kwargs)
