"""测试辅助: 假网关与响应构造函数。"""

import inspect
import json
from typing import Callable, Optional

import httpx

from app.services.gateway_client import AIGatewayClient


GATEWAY_URL = "https://gateway.test/v1/chat/completions"


def completion_response(content: str, status_code: int = 200) -> httpx.Response:
    """chat-completions 形式的响应。"""
    return httpx.Response(
        status_code,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


def user_prompt_of(request: httpx.Request) -> str:
    """取出请求中 user 消息的文本内容。"""
    payload = json.loads(request.content)
    content = payload["messages"][1]["content"]
    if isinstance(content, str):
        return content
    return "".join(part.get("text", "") for part in content)


class FakeGateway:
    """
    基于 httpx.MockTransport 的假网关。
    记录所有出站请求, 用于统计调用次数和检查请求体。
    responder 可以是同步函数, 也可以是 async 函数。
    """

    def __init__(self, responder: Optional[Callable] = None):
        self.requests: list[httpx.Request] = []
        self.responder = responder or (lambda request: completion_response("mocked quote"))

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responder(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def payloads(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]

    def client(self, api_key: str = "test-key") -> AIGatewayClient:
        return AIGatewayClient(
            api_key=api_key,
            url=GATEWAY_URL,
            timeout=5.0,
            transport=httpx.MockTransport(self.handler),
        )
