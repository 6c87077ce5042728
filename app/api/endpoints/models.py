"""
可选 AI 模型目录 API。
前端模型选择器从这里读取可用模型和默认模型。
"""

from fastapi import APIRouter

from app.config import get_settings
from app.models import AI_MODELS

router = APIRouter()


@router.get("")
async def list_models() -> dict:
    """返回可选模型列表与默认模型 ID。"""
    settings = get_settings()
    return {
        "default_model": settings.default_model,
        "models": [model.model_dump() for model in AI_MODELS],
    }
