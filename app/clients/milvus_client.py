"""
Milvus 向量数据库客户端

封装表情包集合的近邻检索，支持本地和远程部署
"""

from typing import List, Dict, Any, Optional
from pymilvus import connections, Collection
from loguru import logger

from app.core.config import settings


class StickerVectorClient:
    """
    表情包向量集合客户端

    集合约定：主键为 assetbundleName（VARCHAR），`name` 为展示名，
    向量字段名由 STICKER_VECTOR_FIELD 配置，索引使用 COSINE 度量
    """

    def __init__(
        self,
        collection_name: Optional[str] = None,
        connect_alias: str = "stickers",
        vector_field: Optional[str] = None,
    ):
        """
        初始化 Milvus 客户端

        Args:
            collection_name: 集合名称
            connect_alias: 连接别名
            vector_field: 向量字段名
        """
        self.collection_name = collection_name or settings.STICKER_COLLECTION
        self.connect_alias = connect_alias
        self.vector_field = vector_field or settings.STICKER_VECTOR_FIELD
        self.collection = None
        self._connect()

    def _connect(self):
        """
        连接到 Milvus 并加载集合

        根据配置自动适配本地/远程部署，支持认证和TLS
        """
        try:
            connect_params = {
                "alias": self.connect_alias,
                "host": settings.MILVUS_HOST,
                "port": str(settings.MILVUS_PORT),
            }

            if settings.MILVUS_USER and settings.MILVUS_PASSWORD:
                connect_params["user"] = settings.MILVUS_USER
                connect_params["password"] = settings.MILVUS_PASSWORD
                logger.info(f"连接 Milvus 使用认证: user={settings.MILVUS_USER}")

            if settings.MILVUS_SECURE:
                connect_params["secure"] = True
                logger.info("连接 Milvus 启用 TLS 加密")

            connections.connect(**connect_params)
            logger.info(
                f"成功连接到 Milvus: {settings.MILVUS_HOST}:{settings.MILVUS_PORT}"
            )

            self.collection = Collection(self.collection_name, using=self.connect_alias)
            self.collection.load()
            logger.info(f"成功加载 Milvus 集合: {self.collection_name}")

        except Exception as e:
            logger.error(f"连接 Milvus 失败: {e}")
            raise

    def query(self, vector: List[float], limit: int) -> List[Dict[str, Any]]:
        """
        近邻检索

        Args:
            vector: 查询向量
            limit: 返回结果数量

        Returns:
            按相似度降序的结果，格式: [{"id": "stamp0001", "score": 0.83, "metadata": {"name": ...}}, ...]
        """
        try:
            logger.debug(f"执行表情包向量检索: vector_dim={len(vector)}, limit={limit}")

            search_params = {"metric_type": "COSINE", "params": {"nprobe": 10}}

            results = self.collection.search(
                data=[vector],
                anns_field=self.vector_field,
                param=search_params,
                limit=limit,
                output_fields=["name"],
            )

            items = []
            for hit in results[0]:
                items.append(
                    {
                        "id": str(hit.id),
                        "score": float(hit.distance),  # COSINE 下越大越相似
                        "metadata": {"name": hit.entity.get("name")},
                    }
                )

            logger.info(f"表情包向量检索完成，返回 {len(items)} 条结果")
            return items

        except Exception as e:
            logger.error(f"表情包向量检索失败: {e}")
            raise

    def close(self):
        """关闭连接"""
        try:
            connections.disconnect(self.connect_alias)
            logger.info("Milvus 连接已关闭")
        except Exception as e:
            logger.warning(f"关闭 Milvus 连接时出错: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
