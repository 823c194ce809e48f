"""
表情包推荐 API 端点

同一路径同时支持 GET（查询参数）和 POST（JSON 请求体），
统一返回 {success, stickers, query} / {success, error} 信封
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from loguru import logger

from app.api.deps import get_sticker_search_service
from app.schemas.sticker_schema import ErrorResponse, RecommendationRequest, StickerRecommendResponse
from app.stickers.errors import StickerErrorCode, StickerRecommendError
from app.stickers.recent import RECENT_EXCLUDE_LIMIT, extract_recent_stickers
from app.stickers.request_parser import parse_json_request, parse_query_request
from app.stickers.response import error_response, preflight_response, success_response
from app.stickers.searcher import StickerSearchService

router = APIRouter()


async def _read_query_request(request: Request) -> RecommendationRequest:
    return parse_query_request(request.query_params)


async def _read_json_request(request: Request) -> RecommendationRequest:
    return parse_json_request(await request.body())


# 按 HTTP 方法选择入参解析方式，不在表中的方法一律 405
REQUEST_READERS = {
    "GET": _read_query_request,
    "POST": _read_json_request,
}


@router.api_route(
    "/recommend",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "TRACE", "OPTIONS"],
    response_model=StickerRecommendResponse,
    responses={
        400: {"model": ErrorResponse, "description": "INVALID_REQUEST / INVALID_JSON"},
        405: {"model": ErrorResponse, "description": "METHOD_NOT_ALLOWED"},
        500: {"model": ErrorResponse, "description": "INTERNAL_ERROR"},
        503: {"model": ErrorResponse, "description": "VECTORIZE_UNAVAILABLE"},
    },
    summary="根据提示词推荐表情包",
)
async def recommend_stickers(
    request: Request,
    service: Optional[StickerSearchService] = Depends(get_sticker_search_service),
):
    """
    **表情包推荐接口**

    - **prompt**: 提示词（必填）
    - **topK**: 返回数量，1-20，非法值回退为 5
    - **excludeRecent**: 最近消息（POST 数组）或表情包ID（GET 逗号分隔），
      从中提取最多 10 个表情包ID 并在结果中排除

    **流程：**
    1. 检查向量检索是否可用
    2. 按方法解析入参
    3. 提取最近使用的表情包
    4. 向量检索 + 排除 + 截断
    """
    if request.method == "OPTIONS":
        return preflight_response()

    try:
        if service is None:
            return error_response(
                StickerErrorCode.VECTORIZE_UNAVAILABLE,
                "Sticker recommendation service is not available",
            )

        reader = REQUEST_READERS.get(request.method)
        if reader is None:
            return error_response(
                StickerErrorCode.METHOD_NOT_ALLOWED,
                "Only GET and POST methods are supported",
            )

        params = await reader(request)

        exclude_ids = None
        if params.exclude_recent is not None:
            exclude_ids = extract_recent_stickers(params.exclude_recent, RECENT_EXCLUDE_LIMIT)

        logger.info(
            f"[API] 收到表情包推荐请求: method={request.method}, top_k={params.top_k}, "
            f"excluded={len(exclude_ids or [])}"
        )

        stickers = await service.search(params.prompt, params.top_k, exclude_ids)
        return success_response(stickers, params.prompt)

    except StickerRecommendError as exc:
        logger.info(f"[API] 表情包推荐请求无效: code={exc.code.value}, message={exc.message}")
        return error_response(exc.code, exc.message)
    except Exception:
        logger.exception("[API] 表情包推荐失败")
        return error_response(StickerErrorCode.INTERNAL_ERROR, "An internal error occurred")


@router.get("/health", summary="表情包推荐健康检查")
async def health_check(
    service: Optional[StickerSearchService] = Depends(get_sticker_search_service),
):
    """检查向量检索能力是否可用"""
    return {
        "status": "healthy" if service is not None else "degraded",
        "service": "sticker-recommend",
        "vectorize_available": service is not None,
    }
