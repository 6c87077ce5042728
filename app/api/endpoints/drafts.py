"""
表单草稿 API。
前端启动时读取一次草稿, 之后每次修改表单都整体写回。
"""

import logging

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError

from app.exceptions import InputValidationError
from app.models import FormDraft
from app.services import get_draft_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{owner}")
async def get_draft(owner: str) -> dict:
    """读取用户草稿。"""
    store = get_draft_store()
    draft = await store.load(owner)

    if not draft:
        raise HTTPException(status_code=404, detail="草稿不存在")

    return draft.model_dump(mode="json")


@router.put("/{owner}")
async def save_draft(owner: str, payload: dict = Body(...)) -> dict:
    """保存用户草稿 (路径中的用户名优先于请求体中的 owner)。"""
    try:
        draft = FormDraft.model_validate({**payload, "owner": owner})
    except ValidationError as e:
        raise InputValidationError("草稿格式无效", details=str(e))

    store = get_draft_store()
    saved = await store.save(draft)
    logger.info("[API] 草稿已保存")

    return saved.model_dump(mode="json")


@router.delete("/{owner}")
async def delete_draft(owner: str) -> dict:
    """删除用户草稿。"""
    store = get_draft_store()
    if not await store.delete(owner):
        raise HTTPException(status_code=404, detail="草稿不存在")

    return {"message": "草稿已删除", "owner": owner}
