"""
报价方案生成请求/响应的数据模型。

请求在边界处只解析一次: QuoteRequest.content_source() 把松散的
transcript / documentBase64 / audioBase64 字段转换为带标签的 ContentSource,
下游代码不再重复判断字段是否存在。
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.exceptions import InputValidationError


DEFAULT_AUDIO_MIME = "audio/webm"
DEFAULT_DOCUMENT_MIME = "application/pdf"


class ContentKind(str, Enum):
    """内容来源类型。"""

    TEXT = "text"          # 直接粘贴的文本
    DOCUMENT = "document"  # PDF / Word 等文档
    AUDIO = "audio"        # 录音文件


class InlineText(BaseModel):
    """直接提供的文本, 无需调用模型提取。"""

    kind: Literal[ContentKind.TEXT] = ContentKind.TEXT
    text: str


class DocumentPayload(BaseModel):
    """base64 编码的文档, 由模型提取文字。"""

    kind: Literal[ContentKind.DOCUMENT] = ContentKind.DOCUMENT
    data_base64: str
    mime_type: str = DEFAULT_DOCUMENT_MIME

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data_base64}"


class AudioPayload(BaseModel):
    """base64 编码的录音, 由模型转写为文字。"""

    kind: Literal[ContentKind.AUDIO] = ContentKind.AUDIO
    data_base64: str
    mime_type: str = DEFAULT_AUDIO_MIME

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data_base64}"


ContentSource = Union[InlineText, DocumentPayload, AudioPayload]


class GenerationOptions(BaseModel):
    """方案生成阶段使用的只读参数。"""

    price_list: str
    prompt_template: Optional[str] = None
    model: Optional[str] = None
    variant_count: int = 1
    client_brand: Optional[str] = None
    product_url: Optional[str] = None
    use_markdown: bool = True


class QuoteRequest(BaseModel):
    """
    POST /generate-quote 的请求体 (字段使用 camelCase)。
    未知字段会被忽略。
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    audio_base64: Optional[str] = Field(default=None, alias="audioBase64")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    document_base64: Optional[str] = Field(default=None, alias="documentBase64")
    document_type: Optional[str] = Field(default=None, alias="documentType")
    transcript: Optional[str] = None
    price_list: Optional[str] = Field(default=None, alias="priceList")
    custom_prompt: Optional[str] = Field(default=None, alias="customPrompt")
    model: Optional[str] = None
    generate_count: Optional[int] = Field(default=None, alias="generateCount")
    client_brand: Optional[str] = Field(default=None, alias="clientBrand")
    product_url: Optional[str] = Field(default=None, alias="productUrl")
    use_markdown: Optional[bool] = Field(default=None, alias="useMarkdown")

    def content_source(self) -> ContentSource:
        """
        按优先级 (文本 > 文档 > 音频) 构造内容来源。

        Raises:
            InputValidationError: 三种内容来源都为空
        """
        if self.transcript:
            return InlineText(text=self.transcript)
        if self.document_base64:
            return DocumentPayload(
                data_base64=self.document_base64,
                mime_type=self.document_type or DEFAULT_DOCUMENT_MIME,
            )
        if self.audio_base64:
            return AudioPayload(
                data_base64=self.audio_base64,
                mime_type=self.mime_type or DEFAULT_AUDIO_MIME,
            )
        raise InputValidationError("未提供录音、文档或文字内容")

    def variant_count(self) -> int:
        """0 表示只提取文字; 其余取值限制在 1 到 2 之间。"""
        if self.generate_count is None:
            return 1
        if self.generate_count == 0:
            return 0
        return max(1, min(2, self.generate_count))

    def generation_options(self) -> GenerationOptions:
        """
        Raises:
            InputValidationError: 价目表为空
        """
        if not self.price_list or not self.price_list.strip():
            raise InputValidationError("未提供价目表")

        return GenerationOptions(
            price_list=self.price_list,
            prompt_template=self.custom_prompt or None,
            model=self.model or None,
            variant_count=self.variant_count(),
            client_brand=self.client_brand or None,
            product_url=self.product_url or None,
            use_markdown=True if self.use_markdown is None else self.use_markdown,
        )


class RefineRequest(BaseModel):
    """POST /generate-quote/refine 的请求体: 根据修改意见调整已有方案。"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    current_proposal: Optional[str] = Field(default=None, alias="currentProposal")
    instruction: Optional[str] = None
    price_list: Optional[str] = Field(default=None, alias="priceList")
    model: Optional[str] = None
    use_markdown: Optional[bool] = Field(default=None, alias="useMarkdown")


class QuoteResult(BaseModel):
    """流水线执行结果。quote 为空表示只执行了提取步骤。"""

    transcription: str
    quote: Optional[str] = None
    quote2: Optional[str] = None


class QuoteResponse(BaseModel):
    """成功响应体。"""

    model_config = ConfigDict(populate_by_name=True)

    transcription: str
    quote: Optional[str] = None
    quote2: Optional[str] = None
    success: bool = True

    @classmethod
    def from_result(cls, result: QuoteResult) -> "QuoteResponse":
        return cls(
            transcription=result.transcription,
            quote=result.quote,
            quote2=result.quote2,
        )
