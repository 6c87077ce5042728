"""
报价方案生成流水线的编排器。

处理流程:
    extract → [generate, generate?] → join

1. 提取 (Extraction): 文本直接使用; 文档/音频调用一次网关提取文字
2. 提前返回: variant_count == 0 时只返回提取结果
3. 生成 (Generation): 一个方案调用一次网关; 两个方案时两次调用并行执行,
   两者都完成后再检查结果, 任一失败则整体失败 (不返回部分结果)

不做重试, 每个阶段的失败都是本次调用的最终结果。
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from app.exceptions import InputValidationError
from app.models import (
    ContentSource,
    InlineText,
    GenerationOptions,
    QuoteRequest,
    RefineRequest,
    QuoteResult,
)
from app.services.gateway_client import AIGatewayClient, get_gateway_client

logger = logging.getLogger(__name__)


class QuotePipeline:
    """
    提取与生成两个阶段的编排类。
    本身不持有任何跨请求的可变状态。
    """

    def __init__(self, gateway_client: Optional[AIGatewayClient] = None):
        self.gateway_client = gateway_client or get_gateway_client()

        # 避免循环引用, 在这里再导入各阶段
        from app.layers.layer1_extraction import ContentExtractor
        from app.layers.layer2_generation import QuoteGenerator

        self.extractor = ContentExtractor(self.gateway_client)
        self.generator = QuoteGenerator(self.gateway_client)

    async def process(self, request: QuoteRequest) -> QuoteResult:
        """
        处理一次 generate-quote 请求。

        在调用网关之前完成全部输入检查: 内容来源与价目表缺一不可。

        Raises:
            InputValidationError: 没有内容来源或价目表为空
            QuoteGeneratorError: 任一阶段失败
        """
        source = request.content_source()
        options = request.generation_options()
        return await self.run(source, options)

    async def refine(self, request: RefineRequest) -> QuoteResult:
        """
        根据用户的修改意见调整已有方案。

        把当前方案和修改要求组合成文本内容, 使用修改助手模板生成一个方案。
        """
        from app.layers.layer2_generation.prompts import (
            REVISION_TEMPLATE,
            REVISION_REQUEST_TEMPLATE,
        )

        if not request.current_proposal or not request.current_proposal.strip():
            raise InputValidationError("未提供当前方案内容")
        if not request.instruction or not request.instruction.strip():
            raise InputValidationError("未提供修改要求")
        if not request.price_list or not request.price_list.strip():
            raise InputValidationError("未提供价目表")

        source = InlineText(
            text=REVISION_REQUEST_TEMPLATE.format(
                current_proposal=request.current_proposal,
                instruction=request.instruction.strip(),
            )
        )
        options = GenerationOptions(
            price_list=request.price_list,
            prompt_template=REVISION_TEMPLATE,
            model=request.model or None,
            variant_count=1,
            use_markdown=True if request.use_markdown is None else request.use_markdown,
        )
        return await self.run(source, options)

    async def run(self, source: ContentSource, options: GenerationOptions) -> QuoteResult:
        """流水线主函数: 提取 → (可选) 生成。"""
        start_time = datetime.now()
        logger.info(
            f"[Pipeline] 开始: source={source.kind.value}, variants={options.variant_count}"
        )

        # ========== 第一步: 提取 ==========
        transcription = await self.extractor.extract(source)

        if options.variant_count == 0:
            logger.info("[Pipeline] 仅提取模式, 跳过方案生成")
            return QuoteResult(transcription=transcription)

        # ========== 第二步: 生成 (fan-out / fan-in) ==========
        quotes = await self._execute_generation(transcription, options)

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[Pipeline] 完成: {len(quotes)}个方案, {elapsed:.1f}s")

        return QuoteResult(
            transcription=transcription,
            quote=quotes[0],
            quote2=quotes[1] if len(quotes) > 1 else None,
        )

    async def _execute_generation(
        self,
        transcription: str,
        options: GenerationOptions,
    ) -> list[str]:
        """
        并行生成 1~2 个方案。

        return_exceptions=True 保证所有调用都结束后再检查结果;
        只要有一个失败就抛出第一个异常。
        """
        count = max(1, min(2, options.variant_count))

        results = await asyncio.gather(
            *[
                self.generator.generate(transcription, options, variant_index=index)
                for index in range(1, count + 1)
            ],
            return_exceptions=True,
        )

        for index, result in enumerate(results, start=1):
            if isinstance(result, BaseException):
                logger.error(f"[Pipeline] 方案 {index} 生成失败: {type(result).__name__}")
                raise result

        return list(results)


# 单例实例
_quote_pipeline: Optional[QuotePipeline] = None


def get_quote_pipeline() -> QuotePipeline:
    """获取或创建流水线单例。"""
    global _quote_pipeline
    if _quote_pipeline is None:
        _quote_pipeline = QuotePipeline()
    return _quote_pipeline
