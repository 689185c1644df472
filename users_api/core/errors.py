"""统一错误类型与异常处理器

所有错误响应体统一为 `{"error": "<message>"}`。
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException


class NotFoundError(Exception):
    """资源不存在"""

    message = "Not found"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class UserNotFoundError(NotFoundError):
    message = "User not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> 404: {exc}")
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求参数校验失败统一返回 400，区分路径参数、查询参数与请求体"""
    sources = {err.get("loc", ("",))[0] for err in exc.errors()}
    if "path" in sources:
        message = "Invalid user ID"
    elif "query" in sources:
        message = "Invalid query parameter"
    else:
        message = "Invalid request payload"
    logger.warning(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"❌ {request.method} {request.url.path} failed: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
