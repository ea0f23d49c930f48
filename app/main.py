from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.biz_response import BizResponse
from app.core.config import settings
from app.core.exceptions import http_exception_handler, validation_exception_handler
from app.core.logx import logger
from app.routers import users, auth
from app.storage.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    # 持久层等未预期的异常不在业务层转换，统一在这里记录并返回 500
    logger.exception(f"Unhandled error on {request.url}: {exc}")
    return BizResponse(data=None, msg="Internal server error", status_code=500)


# 注册路由
app.include_router(auth.auth_router)
app.include_router(users.users_router)


@app.get("/")
def root():
    return {"message": "Welcome to Social Graph Service"}
