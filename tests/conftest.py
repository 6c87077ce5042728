"""共享 pytest fixture。"""

import pytest

from app.services.orchestrator import QuotePipeline
from tests.support import FakeGateway


@pytest.fixture
def fake_gateway():
    """对所有请求返回 "mocked quote" 的假网关。"""
    return FakeGateway()


@pytest.fixture
def gateway_client(fake_gateway):
    return fake_gateway.client()


@pytest.fixture
def pipeline(gateway_client):
    return QuotePipeline(gateway_client=gateway_client)


@pytest.fixture
def base_request_body():
    """最小的合法请求体 (文字内容 + 价目表)。"""
    return {
        "transcript": "客户想拓展欧洲市场",
        "priceList": "套餐A: $100",
    }


@pytest.fixture
async def api_client(pipeline, monkeypatch):
    """
    httpx AsyncClient fixture (FastAPI 测试用)。
    流水线替换为连接假网关的实例。
    """
    from httpx import AsyncClient, ASGITransport
    from app.main import app

    monkeypatch.setattr("app.api.endpoints.quote.get_quote_pipeline", lambda: pipeline)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
