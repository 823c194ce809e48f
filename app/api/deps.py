# 依赖注入（共享的表情包检索服务）
from typing import Optional

from loguru import logger

from app.clients.milvus_client import StickerVectorClient
from app.core.config import settings
from app.services.embedding_service import EmbeddingService
from app.stickers.searcher import StickerSearchService

_sticker_search_service: Optional[StickerSearchService] = None


def init_sticker_search_service() -> Optional[StickerSearchService]:
    """
    启动时创建检索服务（Embedding + Milvus）

    Milvus 未配置或连接失败时只记录日志，服务以“向量检索不可用”状态启动
    """
    global _sticker_search_service

    if not settings.MILVUS_HOST:
        logger.warning("未配置 MILVUS_HOST，表情包推荐不可用")
        return None

    try:
        vector_client = StickerVectorClient()
        embedding_service = EmbeddingService()
    except Exception as e:
        logger.error(f"表情包检索服务初始化失败，推荐不可用: {e}")
        return None

    _sticker_search_service = StickerSearchService(
        embedding_service=embedding_service,
        vector_client=vector_client,
        max_limit=settings.STICKER_SEARCH_MAX_LIMIT,
    )
    return _sticker_search_service


async def close_sticker_search_service() -> None:
    global _sticker_search_service

    service = _sticker_search_service
    _sticker_search_service = None
    if service is None:
        return
    service.vector_client.close()
    await service.embedding_service.close()


def get_sticker_search_service() -> Optional[StickerSearchService]:
    """None 表示向量检索能力不可用"""
    return _sticker_search_service
