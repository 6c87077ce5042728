"""
API 路由配置。
把各功能模块的路由汇总到一个路由器中。
"""

from fastapi import APIRouter

from app.api.endpoints import health, quote, models, drafts

# 主路由器
api_router = APIRouter()

# 健康检查 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 报价方案生成 (/generate-quote)
api_router.include_router(
    quote.router,
    prefix="/generate-quote",
    tags=["quote"]
)

# 可选模型目录 (/models)
api_router.include_router(
    models.router,
    prefix="/models",
    tags=["models"]
)

# 表单草稿 (/drafts)
api_router.include_router(
    drafts.router,
    prefix="/drafts",
    tags=["drafts"]
)
