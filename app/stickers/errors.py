from __future__ import annotations

from enum import Enum


class StickerErrorCode(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_JSON = "INVALID_JSON"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    VECTORIZE_UNAVAILABLE = "VECTORIZE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_STATUS: dict[StickerErrorCode, int] = {
    StickerErrorCode.INVALID_REQUEST: 400,
    StickerErrorCode.INVALID_JSON: 400,
    StickerErrorCode.METHOD_NOT_ALLOWED: 405,
    StickerErrorCode.VECTORIZE_UNAVAILABLE: 503,
    StickerErrorCode.INTERNAL_ERROR: 500,
}


class StickerRecommendError(Exception):
    """推荐接口的业务错误，携带稳定的错误码，由端点转换为错误响应。"""

    def __init__(self, code: StickerErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.code]
