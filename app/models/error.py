"""错误响应模型。"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """统一的失败响应体。"""

    error: str = Field(description="可直接展示给用户的错误信息")
    error_code: str = Field(description="错误码 (例如: ERR_RATE_LIMITED)")
    success: bool = Field(default=False)
