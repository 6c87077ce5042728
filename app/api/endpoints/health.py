"""
健康检查接口。
用于确认服务是否正常运行。
"""

from fastapi import APIRouter

from app.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """服务正常时返回 {"status": "healthy"}。"""
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    详细状态。
    同时返回当前使用的模型和网关密钥是否已配置。
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "default_model": settings.default_model,
            "extraction_model": settings.extraction_model,
            "gateway_url": settings.ai_gateway_url,
            "api_key_configured": bool(settings.ai_gateway_api_key),
        }
    }
