from __future__ import annotations

from typing import Any, Optional

# 固定的表情包目录（已按相似度降序，含同分项）
CATALOG: list[tuple[str, str, float]] = [
    ("stamp0001", "Happy Birthday", 0.95),
    ("stamp0002", "Cake", 0.91),
    ("stamp0003", "Party", 0.91),
    ("stamp0004", "Congrats", 0.84),
    ("stamp0005", "Thanks", 0.77),
    ("stamp0006", "Cheers", 0.70),
    ("stamp0007", "Smile", 0.52),
    ("stamp0008", "Sleepy", 0.31),
]


class FakeEmbeddingService:
    """进程内 Embedding 替身：返回固定向量并记录调用"""

    def __init__(self, error: Optional[Exception] = None):
        self._error = error
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self._error is not None:
            raise self._error
        return [0.1, 0.2, 0.3]

    async def close(self) -> None:
        return None


class FakeVectorClient:
    """
    进程内向量库替身

    按目录顺序返回前 limit 条，模拟向量库已按相似度降序排列的结果
    """

    def __init__(
        self,
        catalog: Optional[list[tuple[str, str, float]]] = None,
        error: Optional[Exception] = None,
    ):
        self._catalog = list(CATALOG if catalog is None else catalog)
        self._error = error
        self.limits: list[int] = []

    def query(self, vector: list[float], limit: int) -> list[dict[str, Any]]:
        self.limits.append(limit)
        if self._error is not None:
            raise self._error
        return [
            {"id": sticker_id, "score": score, "metadata": {"name": name}}
            for sticker_id, name, score in self._catalog[:limit]
        ]

    def close(self) -> None:
        return None
