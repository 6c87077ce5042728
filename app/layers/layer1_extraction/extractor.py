"""Content extractor - turns a content source into plain text."""

import logging

from app.config import get_settings
from app.layers.base_stage import BaseStage
from app.models import ContentSource, InlineText, DocumentPayload, AudioPayload

from .prompts import (
    AUDIO_TRANSCRIPTION_SYSTEM_PROMPT,
    AUDIO_TRANSCRIPTION_INSTRUCTION,
    DOCUMENT_EXTRACTION_SYSTEM_PROMPT,
    DOCUMENT_EXTRACTION_INSTRUCTION,
)

logger = logging.getLogger(__name__)


class ContentExtractor(BaseStage[ContentSource, str, None]):
    """
    内容提取阶段。

    - InlineText: 原样返回, 不调用网关
    - DocumentPayload: 一次网关调用, 提取文档全部文字
    - AudioPayload: 一次网关调用, 转写录音并标注说话者
    """

    _stage_name = "ContentExtractor"

    async def extract(self, source: ContentSource) -> str:
        return await self.run(source, None)

    async def _do_run(self, source: ContentSource, context: None) -> str:
        if isinstance(source, InlineText):
            logger.info(f"[ContentExtractor] 使用直接提供的文本: {len(source.text)} chars")
            return source.text

        model = get_settings().extraction_model

        if isinstance(source, DocumentPayload):
            logger.info(
                f"[ContentExtractor] 文档提取: type={source.mime_type}, "
                f"base64={len(source.data_base64)} chars"
            )
            text = await self.gateway_client.complete_with_attachment(
                model=model,
                system_prompt=DOCUMENT_EXTRACTION_SYSTEM_PROMPT,
                instruction=DOCUMENT_EXTRACTION_INSTRUCTION,
                data_url=source.data_url,
                stage="extract-document",
            )
        elif isinstance(source, AudioPayload):
            logger.info(
                f"[ContentExtractor] 音频转写: type={source.mime_type}, "
                f"base64={len(source.data_base64)} chars"
            )
            text = await self.gateway_client.complete_with_attachment(
                model=model,
                system_prompt=AUDIO_TRANSCRIPTION_SYSTEM_PROMPT,
                instruction=AUDIO_TRANSCRIPTION_INSTRUCTION,
                data_url=source.data_url,
                stage="extract-audio",
            )
        else:
            raise TypeError(f"Unsupported content source: {type(source).__name__}")

        logger.info(f"[ContentExtractor] 提取结果: {len(text)} chars")
        return text
