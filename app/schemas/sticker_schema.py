"""
表情包推荐的请求和响应 Schema
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class RecommendationRequest(BaseModel):
    """
    规范化后的推荐请求

    只由 app.stickers.request_parser 中的解析函数构造，字段均已校验
    """
    prompt: str = Field(..., min_length=1, description="推荐提示词（已去除首尾空白）")
    top_k: int = Field(5, ge=1, le=20, description="返回数量")
    exclude_recent: Optional[List[str]] = Field(None, description="最近消息或表情包ID")

    model_config = ConfigDict(frozen=True)


class ScoredSticker(BaseModel):
    """带相似度分数的表情包"""
    assetbundleName: str = Field(..., description="表情包资源ID")
    name: str = Field(..., description="展示名")
    score: float = Field(..., ge=0.0, le=1.0, description="相似度分数（0-1）")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "assetbundleName": "stamp0001",
                "name": "Happy Birthday",
                "score": 0.83,
            }
        }
    )


class StickerRecommendResponse(BaseModel):
    """推荐成功响应"""
    success: bool = Field(True, description="请求是否成功")
    stickers: List[ScoredSticker] = Field(default_factory=list, description="推荐结果（按分数降序）")
    query: str = Field(..., description="规范化后的提示词")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "stickers": [
                    {"assetbundleName": "stamp0001", "name": "Happy Birthday", "score": 0.83},
                    {"assetbundleName": "stamp0042", "name": "Cake", "score": 0.79},
                ],
                "query": "birthday cake",
            }
        }
    )


# ============= 通用错误响应 Schema =============

class ErrorBody(BaseModel):
    code: str = Field(..., description="错误代码")
    message: str = Field(..., description="错误信息")


class ErrorResponse(BaseModel):
    """错误响应"""
    success: bool = Field(False, description="请求失败")
    error: ErrorBody

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": {
                    "code": "INVALID_REQUEST",
                    "message": "prompt query parameter is required",
                },
            }
        }
    )
