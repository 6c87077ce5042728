"""
表单草稿模型。

草稿是一个显式的、带版本号的值对象: 启动时加载一次, 每次修改后整体写回。
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .quote import ContentKind


DRAFT_SCHEMA_VERSION = 1


class FormDraft(BaseModel):
    """用户当前填写中的表单内容。"""

    schema_version: int = DRAFT_SCHEMA_VERSION
    owner: str = Field(..., description="用户名 (按名称识别身份)")
    input_mode: ContentKind = ContentKind.AUDIO
    client_brand: str = ""
    product_url: str = ""
    transcript: str = ""
    price_list: str = ""
    price_list_version_name: Optional[str] = None  # 价目表版本名称
    prompt: str = ""
    prompt_version_name: Optional[str] = None  # 提示词版本名称
    model: Optional[str] = None
    generate_two: bool = False  # 是否同时生成两个方案
    use_markdown: bool = True
    updated_at: datetime = Field(default_factory=datetime.now)

    def serialize(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def deserialize(cls, raw: str) -> "FormDraft":
        return cls.model_validate_json(raw)
