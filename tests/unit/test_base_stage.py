"""
Unit tests for BaseStage template method.

Verifies that subclasses receive input and context unchanged,
and that failures are re-raised rather than swallowed.
"""

import logging

import pytest

from app.layers.base_stage import BaseStage
from tests.support import FakeGateway


class EchoStage(BaseStage[str, str, dict]):
    _stage_name = "EchoStage"

    async def _do_run(self, input_doc, context):
        return f"{input_doc}:{context['suffix']}"


class FailingStage(BaseStage[str, str, None]):
    _stage_name = "FailingStage"

    async def _do_run(self, input_doc, context):
        raise ValueError("boom")


class TestBaseStage:
    async def test_run_returns_do_run_result(self):
        stage = EchoStage(FakeGateway().client())
        assert await stage.run("hello", {"suffix": "world"}) == "hello:world"

    async def test_failure_is_reraised(self):
        stage = FailingStage(FakeGateway().client())
        with pytest.raises(ValueError, match="boom"):
            await stage.run("x", None)

    async def test_failure_is_logged_with_stage_name(self, caplog):
        stage = FailingStage(FakeGateway().client())
        with caplog.at_level(logging.ERROR, logger="app.layers.base_stage"):
            with pytest.raises(ValueError):
                await stage.run("x", None)
        assert "[FailingStage] 失败" in caplog.text

    def test_injected_client_is_used(self):
        client = FakeGateway().client()
        assert EchoStage(client).gateway_client is client

    def test_cannot_instantiate_abstract_base(self):
        with pytest.raises(TypeError):
            BaseStage()
