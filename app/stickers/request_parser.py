"""
推荐请求解析

GET（查询参数）与 POST（JSON 请求体）两种入参形式，统一解析为 RecommendationRequest。
解析函数要么返回完整校验过的请求，要么抛出 StickerRecommendError，不做任何外部调用。
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional

from app.schemas.sticker_schema import RecommendationRequest
from app.stickers.errors import StickerErrorCode, StickerRecommendError

DEFAULT_TOP_K = 5
MAX_TOP_K = 20

# 仅接受十进制 ASCII 整数，排除 "1_0"、全角数字等写法
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _clean_prompt(raw: Any, missing_message: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise StickerRecommendError(StickerErrorCode.INVALID_REQUEST, missing_message)
    return raw.strip()


def _in_range(value: int) -> bool:
    return 1 <= value <= MAX_TOP_K


def parse_query_request(params: Mapping[str, str]) -> RecommendationRequest:
    """
    解析 GET 查询参数

    - prompt: 必填，去除首尾空白
    - topK: 可选，解析失败或超出 [1, 20] 时静默回退为 5
    - excludeRecent: 可选，逗号分隔，逐项去空白并丢弃空项
    """
    prompt = _clean_prompt(params.get("prompt"), "prompt query parameter is required")

    top_k = DEFAULT_TOP_K
    raw_top_k = params.get("topK")
    if raw_top_k:
        text = raw_top_k.strip()
        if _INT_RE.fullmatch(text) and _in_range(int(text)):
            top_k = int(text)

    exclude_recent: Optional[list[str]] = None
    raw_exclude = params.get("excludeRecent")
    if raw_exclude:
        parts = [part.strip() for part in raw_exclude.split(",")]
        exclude_recent = [part for part in parts if part] or None

    return RecommendationRequest(prompt=prompt, top_k=top_k, exclude_recent=exclude_recent)


def _coerce_json_top_k(raw: Any) -> int:
    # bool 是 int 的子类，需单独排除
    if isinstance(raw, bool):
        return DEFAULT_TOP_K
    if isinstance(raw, int) and _in_range(raw):
        return raw
    if isinstance(raw, float) and raw.is_integer() and _in_range(int(raw)):
        return int(raw)
    return DEFAULT_TOP_K


def parse_json_request(body: bytes) -> RecommendationRequest:
    """
    解析 POST JSON 请求体

    - 无法解析为 JSON -> INVALID_JSON
    - 非对象 / prompt 非空字符串校验失败 -> INVALID_REQUEST
    - topK 仅接受 [1, 20] 内的整数，否则静默回退为 5
    - excludeRecent 为字符串数组时原样保留，其他非空类型 -> INVALID_REQUEST
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise StickerRecommendError(
            StickerErrorCode.INVALID_JSON, "Invalid JSON in request body"
        ) from exc

    if not isinstance(payload, dict):
        raise StickerRecommendError(
            StickerErrorCode.INVALID_REQUEST, "request body must be a JSON object"
        )

    prompt = _clean_prompt(
        payload.get("prompt"), "prompt is required and must be a non-empty string"
    )
    top_k = _coerce_json_top_k(payload.get("topK"))

    exclude_recent = payload.get("excludeRecent")
    if exclude_recent is not None:
        if not isinstance(exclude_recent, list) or not all(
            isinstance(item, str) for item in exclude_recent
        ):
            raise StickerRecommendError(
                StickerErrorCode.INVALID_REQUEST, "excludeRecent must be an array of strings"
            )

    return RecommendationRequest(prompt=prompt, top_k=top_k, exclude_recent=exclude_recent)

