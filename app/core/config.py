# 读取 .env 配置
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Runtime
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # 为空时只输出到控制台

    # Milvus（MILVUS_HOST 为空表示未配置向量检索）
    MILVUS_HOST: str = "localhost"
    MILVUS_PORT: str = "19530"
    MILVUS_USER: str = ""
    MILVUS_PASSWORD: str = ""
    MILVUS_SECURE: bool = False

    # 表情包向量集合
    STICKER_COLLECTION: str = "stickers"
    STICKER_VECTOR_FIELD: str = "embedding"
    STICKER_SEARCH_MAX_LIMIT: int = 100  # 单次向量检索的最大 limit

    # Embedding（兼容 OpenAI 协议的任意端点）
    OPENAI_API_KEY: str = ""
    OPENAI_API_BASE: str = ""
    OPENAI_EMBEDDING_MODEL: str = "text-embedding-3-small"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore" # 忽略多余的环境变量
    )

settings = Settings()
