"""
文件形式的表单草稿存储。

每个用户(按名称识别)一份草稿, 保存为 JSON 文件。
文件名使用用户名的哈希值, 避免路径和特殊字符问题。
"""

import hashlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import aiofiles
from pydantic import ValidationError

from app.config import get_settings
from app.exceptions import InputValidationError, StorageError
from app.models import FormDraft, DRAFT_SCHEMA_VERSION

logger = logging.getLogger(__name__)


class DraftStore:
    """JSON 文件草稿存储。"""

    def __init__(self, base_path: Optional[str] = None):
        self.base_path = Path(base_path or get_settings().draft_storage_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    async def load(self, owner: str) -> Optional[FormDraft]:
        """
        读取草稿。

        文件不存在、内容损坏或版本号高于当前版本时返回 None。
        """
        file_path = self._draft_path(owner)
        if not file_path.exists():
            return None

        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                raw = await f.read()
            draft = FormDraft.deserialize(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error(f"[DraftStore] 草稿读取失败 {file_path.name}: {e}")
            return None

        if draft.schema_version > DRAFT_SCHEMA_VERSION:
            logger.warning(
                f"[DraftStore] 草稿版本 {draft.schema_version} 高于当前版本 "
                f"{DRAFT_SCHEMA_VERSION}, 已忽略"
            )
            return None

        return draft

    async def save(self, draft: FormDraft) -> FormDraft:
        """整体写回草稿, 并刷新 updated_at。"""
        file_path = self._draft_path(draft.owner)
        draft = draft.model_copy(
            update={"updated_at": datetime.now(), "schema_version": DRAFT_SCHEMA_VERSION}
        )

        try:
            async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
                await f.write(draft.serialize())
        except OSError as e:
            logger.error(f"[DraftStore] 草稿保存失败 {file_path}: {e}", exc_info=True)
            raise StorageError(
                "草稿保存失败",
                details={"path": str(file_path), "error": str(e)},
            )

        return draft

    async def delete(self, owner: str) -> bool:
        file_path = self._draft_path(owner)
        if file_path.exists():
            file_path.unlink()
            return True
        return False

    def _draft_path(self, owner: str) -> Path:
        if not owner or not owner.strip():
            raise InputValidationError("用户名不能为空")
        digest = hashlib.sha256(owner.strip().encode("utf-8")).hexdigest()[:24]
        return self.base_path / f"{digest}.json"


# 单例实例
_draft_store: Optional[DraftStore] = None


def get_draft_store() -> DraftStore:
    """获取 DraftStore 实例。"""
    global _draft_store
    if _draft_store is None:
        _draft_store = DraftStore()
    return _draft_store
