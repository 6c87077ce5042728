"""方案生成的上下文模型。"""

from pydantic import BaseModel, Field

from app.models import GenerationOptions


class VariantContext(BaseModel):
    """
    单个方案的生成上下文。
    两个方案并行生成时各自持有一份, 互不共享状态。
    """

    options: GenerationOptions
    variant_index: int = Field(default=1, ge=1, le=2, description="第几个方案 (1 或 2)")
