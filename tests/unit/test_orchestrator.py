"""
QuotePipeline unit tests.

Input checks before any gateway call, extraction-only mode,
concurrent generation of two variants and all-or-nothing failure.
"""

import asyncio
import json

import httpx
import pytest

from app.exceptions import InputValidationError, RateLimitedError, UpstreamError
from app.layers.layer2_generation.prompts import VARIANT_HINT, REVISION_TEMPLATE
from app.models import QuoteRequest, RefineRequest, InlineText, GenerationOptions
from app.services.orchestrator import QuotePipeline
from tests.support import FakeGateway, completion_response, user_prompt_of


def _request(**fields) -> QuoteRequest:
    return QuoteRequest.model_validate(fields)


def _variant_responder(first="方案一", second="方案二"):
    """第二方案的请求里带有 VARIANT_HINT, 以此区分两个请求。"""

    def respond(request):
        if VARIANT_HINT in user_prompt_of(request):
            return completion_response(second)
        return completion_response(first)

    return respond


class TestInputChecks:
    async def test_missing_content_makes_no_calls(self, pipeline, fake_gateway):
        with pytest.raises(InputValidationError):
            await pipeline.process(_request(priceList="套餐A"))
        assert fake_gateway.call_count == 0

    async def test_missing_price_list_makes_no_calls(self, pipeline, fake_gateway):
        with pytest.raises(InputValidationError):
            await pipeline.process(_request(audioBase64="GkXf"))
        assert fake_gateway.call_count == 0


class TestExtractionOnly:
    async def test_audio_with_zero_count_makes_one_call(self):
        gateway = FakeGateway(lambda request: completion_response("转写文本"))
        pipeline = QuotePipeline(gateway.client())

        result = await pipeline.process(
            _request(audioBase64="GkXf", priceList="套餐A", generateCount=0)
        )

        assert result.transcription == "转写文本"
        assert result.quote is None
        assert result.quote2 is None
        assert gateway.call_count == 1

    async def test_text_with_zero_count_makes_no_calls(self, pipeline, fake_gateway):
        result = await pipeline.process(
            _request(transcript="原文", priceList="套餐A", generateCount=0)
        )

        assert result.transcription == "原文"
        assert result.quote is None
        assert fake_gateway.call_count == 0


class TestGeneration:
    async def test_single_variant(self, pipeline, fake_gateway):
        result = await pipeline.process(_request(transcript="原文", priceList="套餐A"))

        assert result.transcription == "原文"
        assert result.quote == "mocked quote"
        assert result.quote2 is None
        assert fake_gateway.call_count == 1

    async def test_audio_then_single_variant(self):
        def respond(request):
            content = json.loads(request.content)["messages"][1]["content"]
            if isinstance(content, list):
                return completion_response("转写文本")
            return completion_response("方案")

        gateway = FakeGateway(respond)
        pipeline = QuotePipeline(gateway.client())

        result = await pipeline.process(_request(audioBase64="GkXf", priceList="套餐A"))

        assert result.transcription == "转写文本"
        assert result.quote == "方案"
        assert gateway.call_count == 2
        assert "转写文本" in user_prompt_of(gateway.requests[1])

    async def test_two_variants_are_ordered(self):
        gateway = FakeGateway(_variant_responder())
        pipeline = QuotePipeline(gateway.client())

        result = await pipeline.process(
            _request(transcript="原文", priceList="套餐A", generateCount=2)
        )

        assert result.quote == "方案一"
        assert result.quote2 == "方案二"
        assert gateway.call_count == 2

    async def test_two_variants_run_concurrently(self):
        both_started = asyncio.Event()
        started = []

        async def respond(request):
            started.append(request)
            if len(started) == 2:
                both_started.set()
            # 顺序执行时第一个请求会在这里超时
            await asyncio.wait_for(both_started.wait(), timeout=2.0)
            return completion_response("ok")

        gateway = FakeGateway(respond)
        pipeline = QuotePipeline(gateway.client())

        result = await pipeline.process(
            _request(transcript="原文", priceList="套餐A", generateCount=2)
        )

        assert result.quote == "ok"
        assert result.quote2 == "ok"

    async def test_count_above_two_is_clamped(self, pipeline, fake_gateway):
        await pipeline.process(_request(transcript="原文", priceList="套餐A", generateCount=5))
        assert fake_gateway.call_count == 2

    async def test_second_variant_failure_fails_whole_run(self):
        def respond(request):
            if VARIANT_HINT in user_prompt_of(request):
                return httpx.Response(429, text="slow down")
            return completion_response("方案一")

        gateway = FakeGateway(respond)
        pipeline = QuotePipeline(gateway.client())

        with pytest.raises(RateLimitedError):
            await pipeline.process(
                _request(transcript="原文", priceList="套餐A", generateCount=2)
            )
        assert gateway.call_count == 2

    async def test_first_variant_failure_fails_whole_run(self):
        def respond(request):
            if VARIANT_HINT in user_prompt_of(request):
                return completion_response("方案二")
            return httpx.Response(503, text="overloaded")

        gateway = FakeGateway(respond)
        pipeline = QuotePipeline(gateway.client())

        with pytest.raises(UpstreamError) as exc_info:
            await pipeline.process(
                _request(transcript="原文", priceList="套餐A", generateCount=2)
            )
        assert exc_info.value.upstream_status == 503

    async def test_run_accepts_explicit_source(self, pipeline, fake_gateway):
        result = await pipeline.run(
            InlineText(text="原文"),
            GenerationOptions(price_list="套餐A"),
        )
        assert result.quote == "mocked quote"


class TestRefine:
    async def test_refine_sends_proposal_and_instruction(self, pipeline, fake_gateway):
        request = RefineRequest.model_validate(
            {
                "currentProposal": "旧方案内容",
                "instruction": "把预算降低 20%",
                "priceList": "套餐A",
            }
        )

        result = await pipeline.refine(request)

        assert result.quote == "mocked quote"
        assert result.quote2 is None
        assert fake_gateway.call_count == 1
        prompt = user_prompt_of(fake_gateway.requests[0])
        assert prompt.startswith(REVISION_TEMPLATE)
        assert "旧方案内容" in prompt
        assert "把预算降低 20%" in prompt

    @pytest.mark.parametrize(
        "body",
        [
            {"instruction": "改", "priceList": "p"},
            {"currentProposal": "旧", "priceList": "p"},
            {"currentProposal": "旧", "instruction": "改"},
            {"currentProposal": "旧", "instruction": "  ", "priceList": "p"},
        ],
    )
    async def test_refine_input_checks(self, pipeline, fake_gateway, body):
        with pytest.raises(InputValidationError):
            await pipeline.refine(RefineRequest.model_validate(body))
        assert fake_gateway.call_count == 0
