# 路由汇总
from fastapi import APIRouter
from app.api.v1.endpoints import sticker

api_router = APIRouter()

# 挂载表情包推荐模块 (访问地址: /api/v1/stickers/...)
api_router.include_router(sticker.router, prefix="/stickers", tags=["表情包推荐模块"])
