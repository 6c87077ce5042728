"""Quote generator - turns extracted text plus a price list into a sales proposal."""

import logging
from typing import Optional

from app.config import get_settings
from app.layers.base_stage import BaseStage
from app.models import GenerationOptions

from .models import VariantContext
from .prompts import (
    DEFAULT_QUOTE_TEMPLATE,
    VARIANT_HINT,
    CLIENT_INFO_TEMPLATE,
    TRANSCRIPT_SECTION,
    PRICE_LIST_SECTION,
    MARKDOWN_FORMAT_INSTRUCTIONS,
    PLAIN_TEXT_FORMAT_INSTRUCTIONS,
    MARKDOWN_SYSTEM_PROMPT,
    PLAIN_TEXT_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


def build_client_info(client_brand: Optional[str], product_url: Optional[str]) -> str:
    """客户信息段落; 品牌名和产品链接都为空时返回空字符串。"""
    lines = []
    if client_brand and client_brand.strip():
        lines.append(f"- 客户品牌名：{client_brand.strip()}")
    if product_url and product_url.strip():
        lines.append(f"- 产品页面：{product_url.strip()}")
    if not lines:
        return ""
    return CLIENT_INFO_TEMPLATE.format(lines="\n".join(lines))


def build_quote_prompt(
    transcription: str,
    options: GenerationOptions,
    variant_index: int = 1,
) -> str:
    """
    拼接生成提示词。

    顺序:
    1. 基础指令模板 (自定义或默认)
    2. 第二方案提示 (仅 variant_index == 2)
    3. 客户信息 (有品牌名或产品链接时)
    4. 提取后的客户沟通内容
    5. 价目表
    6. 输出格式说明 (Markdown / 纯文本)
    """
    parts = [options.prompt_template or DEFAULT_QUOTE_TEMPLATE]

    if variant_index == 2:
        parts.append(VARIANT_HINT)

    client_info = build_client_info(options.client_brand, options.product_url)
    if client_info:
        parts.append(client_info)

    parts.append(TRANSCRIPT_SECTION.format(transcription=transcription))
    parts.append(PRICE_LIST_SECTION.format(price_list=options.price_list))
    parts.append(
        MARKDOWN_FORMAT_INSTRUCTIONS if options.use_markdown else PLAIN_TEXT_FORMAT_INSTRUCTIONS
    )

    return "\n\n".join(parts)


class QuoteGenerator(BaseStage[str, str, VariantContext]):
    """方案生成阶段: 每次 run() 对应一次网关调用。"""

    _stage_name = "QuoteGenerator"

    async def generate(
        self,
        transcription: str,
        options: GenerationOptions,
        variant_index: int = 1,
    ) -> str:
        context = VariantContext(options=options, variant_index=variant_index)
        return await self.run(transcription, context)

    async def _do_run(self, transcription: str, context: VariantContext) -> str:
        options = context.options
        model = options.model or get_settings().default_model

        prompt = build_quote_prompt(transcription, options, context.variant_index)
        system_prompt = MARKDOWN_SYSTEM_PROMPT if options.use_markdown else PLAIN_TEXT_SYSTEM_PROMPT

        logger.info(
            f"[QuoteGenerator] 方案 {context.variant_index}: model={model}, "
            f"prompt={len(prompt)} chars"
        )

        return await self.gateway_client.complete(
            model=model,
            system_prompt=system_prompt,
            user_prompt=prompt,
            stage=f"generate-{context.variant_index}",
        )
