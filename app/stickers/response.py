"""
推荐接口响应构造

成功与失败都返回 JSON 信封，并附带浏览器端调用所需的跨域响应头
"""

from __future__ import annotations

from typing import Sequence

from fastapi import Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.sticker_schema import (
    ErrorBody,
    ErrorResponse,
    ScoredSticker,
    StickerRecommendResponse,
)
from app.stickers.errors import ERROR_STATUS, StickerErrorCode

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def success_response(stickers: Sequence[ScoredSticker], query: str) -> JSONResponse:
    payload = StickerRecommendResponse(success=True, stickers=list(stickers), query=query)
    return JSONResponse(status_code=200, content=payload.model_dump(), headers=CORS_HEADERS)


def error_response(code: StickerErrorCode, message: str) -> JSONResponse:
    payload = ErrorResponse(success=False, error=ErrorBody(code=code.value, message=message))
    return JSONResponse(
        status_code=ERROR_STATUS[code], content=payload.model_dump(), headers=CORS_HEADERS
    )


def preflight_response() -> Response:
    return Response(status_code=204, headers=CORS_HEADERS)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """路由层拦截的 405 也返回统一错误信封，其余 HTTP 异常走 FastAPI 默认处理"""
    if exc.status_code == 405:
        return error_response(
            StickerErrorCode.METHOD_NOT_ALLOWED, "Only GET and POST methods are supported"
        )
    return await http_exception_handler(request, exc)
