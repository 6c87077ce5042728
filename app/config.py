from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    应用配置类。
    从环境变量(.env 文件)中读取配置值。
    """

    # AI 网关设置: 调用大模型所需的密钥、地址与默认模型
    ai_gateway_api_key: str = ""
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    default_model: str = "google/gemini-3-pro-preview"  # 生成方案时默认使用的模型
    extraction_model: str = "google/gemini-2.5-flash"  # 音频转写/文档提取使用的模型(支持多模态)
    gateway_timeout_seconds: float = 300.0  # 单次网关请求的超时时间(秒)

    # 草稿存储路径
    draft_storage_path: str = "data/drafts"

    # 服务器设置
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    获取配置实例。
    使用 @lru_cache 缓存, 配置只读取一次。
    """
    return Settings()
