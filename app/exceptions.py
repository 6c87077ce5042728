"""
报价方案生成服务的自定义异常层级。
每个异常都带有结构化的错误码, 调用方应根据 error_code 分支, 而不是匹配错误信息文本。
"""

from typing import Optional, Any


class QuoteGeneratorError(Exception):
    """报价生成服务的基础异常类。"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InputValidationError(QuoteGeneratorError):
    """请求缺少必要字段 (没有任何内容来源, 或价目表为空)。"""

    status_code = 400

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class GatewayConfigurationError(QuoteGeneratorError):
    """AI 网关未配置 (缺少 API 密钥)。"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CONFIG_001", details=details)


class UpstreamError(QuoteGeneratorError):
    """AI 网关返回非 2xx 状态码。"""

    def __init__(
        self,
        message: str,
        upstream_status: int,
        upstream_body: str = "",
        error_code: str = "ERR_UPSTREAM_001",
    ):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(
            message,
            error_code=error_code,
            details={"upstream_status": upstream_status, "upstream_body": upstream_body},
        )


class RateLimitedError(UpstreamError):
    """网关返回 429: 请求过于频繁。"""

    status_code = 429

    def __init__(self, upstream_body: str = ""):
        super().__init__(
            "请求过于频繁，请稍后再试",
            upstream_status=429,
            upstream_body=upstream_body,
            error_code="ERR_RATE_LIMITED",
        )


class QuotaExhaustedError(UpstreamError):
    """网关返回 402: AI 服务额度已用尽。"""

    status_code = 402

    def __init__(self, upstream_body: str = ""):
        super().__init__(
            "AI 服务额度已用尽，请联系管理员",
            upstream_status=402,
            upstream_body=upstream_body,
            error_code="ERR_QUOTA_EXHAUSTED",
        )


class GatewayConnectionError(QuoteGeneratorError):
    """无法连接 AI 网关 (网络错误或超时)。"""

    def __init__(self, message: str = "无法连接 AI 服务，请稍后重试", details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_UPSTREAM_CONNECT", details=details)


class EmptyUpstreamResponseError(QuoteGeneratorError):
    """网关返回 2xx 但响应体为空。"""

    def __init__(self, message: str = "AI 服务返回了空响应，请重试", details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_UPSTREAM_EMPTY", details=details)


class MalformedUpstreamResponseError(QuoteGeneratorError):
    """网关返回 2xx 但响应体无法解析为 JSON。"""

    def __init__(self, message: str = "AI 服务返回的数据格式无效，请重试", details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_UPSTREAM_MALFORMED", details=details)


class StorageError(QuoteGeneratorError):
    """草稿文件存储相关错误。"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)
