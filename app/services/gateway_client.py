"""AI gateway client for quote generation.

OpenAI 兼容的 chat-completions 网关客户端。

主要功能:
- complete(): 纯文本对话请求
- complete_with_attachment(): 携带 base64 data URL 附件的请求 (音频/文档统一放在 image_url 字段)

响应解析分两步:
1. 先把响应体读成文本; 为空时抛出 EmptyUpstreamResponseError
2. 再解析 JSON; 失败时抛出 MalformedUpstreamResponseError

网关在高负载下可能返回 200 但响应体为空或被截断, 分两步读取可以给出更明确的错误。
不做任何重试, 每次调用只发一次请求。
"""

import json
import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from app.config import get_settings
from app.exceptions import (
    GatewayConfigurationError,
    GatewayConnectionError,
    UpstreamError,
    RateLimitedError,
    QuotaExhaustedError,
    EmptyUpstreamResponseError,
    MalformedUpstreamResponseError,
)

logger = logging.getLogger(__name__)


class AIGatewayClient:
    """
    AI 网关 HTTP 客户端。

    Attributes:
        api_key: Bearer 认证密钥
        url: chat-completions 接口地址
        timeout: 单次请求超时 (秒)
        _transport: 可注入的 httpx transport (测试时使用 httpx.MockTransport)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_key = settings.ai_gateway_api_key if api_key is None else api_key
        self.url = url or settings.ai_gateway_url
        self.timeout = timeout or settings.gateway_timeout_seconds
        self._transport = transport

    async def complete(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        stage: str = "generate",
    ) -> str:
        """
        Send a plain chat completion request.

        Args:
            model: Model identifier (e.g. google/gemini-2.5-flash)
            system_prompt: System-level instructions
            user_prompt: User message content
            stage: Label used in logs

        Returns:
            The first choice's message content ("" when absent)
        """
        payload = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        return await self._post_chat(payload, stage)

    async def complete_with_attachment(
        self,
        model: str,
        system_prompt: str,
        instruction: str,
        data_url: str,
        stage: str = "extract",
    ) -> str:
        """
        Send a chat completion request with an inlined base64 attachment.

        The attachment travels in the ``image_url`` content part regardless
        of whether it is audio or a document.
        """
        payload = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": instruction},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                },
            ],
        }
        return await self._post_chat(payload, stage)

    async def _post_chat(self, payload: dict, stage: str) -> str:
        """网关请求的公共流程: 发送 → 检查状态码 → 读取文本 → 解析。"""
        if not self.api_key:
            raise GatewayConfigurationError("AI_GATEWAY_API_KEY 未配置")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(f"[Gateway:{stage}] 请求模型 {payload['model']}")
        start_time = datetime.now()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.url, json=payload, headers=headers)
                body = response.text
        except httpx.HTTPError as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"[Gateway:{stage}] 连接失败 ({elapsed:.1f}s): {type(e).__name__}: {e}")
            raise GatewayConnectionError(details={"stage": stage, "error": str(e)}) from e

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"[Gateway:{stage}] 完成: {elapsed:.1f}s, status={response.status_code}, "
            f"body={len(body)} chars"
        )

        if not response.is_success:
            logger.error(f"[Gateway:{stage}] API 错误: {response.status_code} {body[:500]}")
            raise self._map_status_error(response.status_code, body)

        return self._parse_completion_body(body, stage)

    def _map_status_error(self, status: int, body: str) -> UpstreamError:
        """把网关的非 2xx 状态码映射为对应的异常。"""
        if status == 429:
            return RateLimitedError(upstream_body=body)
        if status == 402:
            return QuotaExhaustedError(upstream_body=body)
        return UpstreamError(
            f"AI 服务调用失败 (HTTP {status}): {body}",
            upstream_status=status,
            upstream_body=body,
        )

    def _parse_completion_body(self, body: Optional[str], stage: str = "") -> str:
        """
        解析 chat-completions 响应体。

        Raises:
            EmptyUpstreamResponseError: 响应体为空或只有空白
            MalformedUpstreamResponseError: 响应体不是合法 JSON
        """
        if not body or not body.strip():
            logger.error(f"[Gateway:{stage}] 空响应")
            raise EmptyUpstreamResponseError(details={"stage": stage})

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"[Gateway:{stage}] JSON 解析失败: {e}; body={body[:200]}")
            raise MalformedUpstreamResponseError(
                details={"stage": stage, "error": str(e)}
            ) from e

        return self._extract_content(data)

    @staticmethod
    def _extract_content(data: Any) -> str:
        """取出 choices[0].message.content, 任一层缺失时返回空字符串。"""
        if not isinstance(data, dict):
            return ""
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0]
        if not isinstance(first, dict):
            return ""
        message = first.get("message")
        if not isinstance(message, dict):
            return ""
        content = message.get("content")
        return content if isinstance(content, str) else ""


# Singleton instance for dependency injection
_gateway_client: Optional[AIGatewayClient] = None


def get_gateway_client() -> AIGatewayClient:
    """Get or create gateway client singleton."""
    global _gateway_client
    if _gateway_client is None:
        _gateway_client = AIGatewayClient()
    return _gateway_client
