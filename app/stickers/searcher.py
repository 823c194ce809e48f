"""
表情包相似度检索

向量化提示词 -> Milvus 近邻检索 -> 过滤排除集合 -> 截断为 top_k
"""

import asyncio
from typing import Any, Dict, Iterable, List, Optional
from loguru import logger

from app.clients.milvus_client import StickerVectorClient
from app.schemas.sticker_schema import ScoredSticker
from app.services.embedding_service import EmbeddingService


class StickerSearchService:
    """
    表情包检索服务

    排序完全沿用向量库返回的相似度降序（同分保持库内顺序，不在本地重排），
    本服务只负责扩大召回、过滤与截断
    """

    def __init__(
        self,
        embedding_service: EmbeddingService,
        vector_client: StickerVectorClient,
        max_limit: int = 100,
    ):
        """
        Args:
            embedding_service: 向量化服务
            vector_client: 表情包向量集合客户端
            max_limit: 向量库单次检索允许的最大 limit
        """
        self.embedding_service = embedding_service
        self.vector_client = vector_client
        self.max_limit = max_limit

    def _query_limit(self, top_k: int, exclude_ids: set) -> int:
        # 有排除集合时多取一些，保证过滤后仍能凑满 top_k
        return max(1, min(top_k + len(exclude_ids), self.max_limit))

    async def search(
        self,
        prompt: str,
        top_k: int,
        exclude_ids: Optional[Iterable[str]] = None,
    ) -> List[ScoredSticker]:
        """
        执行检索

        Args:
            prompt: 规范化后的提示词
            top_k: 返回数量上限
            exclude_ids: 需要排除的表情包ID

        Returns:
            按分数降序的表情包列表，长度 <= top_k
        """
        excluded = set(exclude_ids or ())
        limit = self._query_limit(top_k, excluded)

        logger.info(
            f"[StickerSearch] 开始检索: prompt_length={len(prompt)}, top_k={top_k}, "
            f"excluded={len(excluded)}, limit={limit}"
        )

        vector = await self.embedding_service.embed(prompt)
        candidates = await asyncio.to_thread(self.vector_client.query, vector, limit)

        results: List[ScoredSticker] = []
        for candidate in candidates:
            if candidate["id"] in excluded:
                continue
            results.append(self._to_scored_sticker(candidate))
            if len(results) >= top_k:
                break

        logger.info(
            f"[StickerSearch] 检索完成: candidates={len(candidates)}, returned={len(results)}"
        )
        return results

    @staticmethod
    def _to_scored_sticker(candidate: Dict[str, Any]) -> ScoredSticker:
        metadata = candidate.get("metadata") or {}
        sticker_id = candidate["id"]
        # 余弦相似度可能为负，统一收敛到 [0, 1]
        score = min(1.0, max(0.0, float(candidate["score"])))
        return ScoredSticker(
            assetbundleName=sticker_id,
            name=metadata.get("name") or sticker_id,
            score=score,
        )
