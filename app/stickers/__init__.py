"""
表情包推荐模块

提供入参解析、最近使用表情包提取、向量相似度检索与响应构造的核心实现。
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.stickers.errors import StickerErrorCode, StickerRecommendError
    from app.stickers.recent import extract_recent_stickers
    from app.stickers.searcher import StickerSearchService

__all__ = [
    "StickerErrorCode",
    "StickerRecommendError",
    "StickerSearchService",
    "extract_recent_stickers",
]
