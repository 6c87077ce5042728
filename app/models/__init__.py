"""Data models for quote generation service."""

from .quote import (
    ContentKind,
    ContentSource,
    InlineText,
    DocumentPayload,
    AudioPayload,
    GenerationOptions,
    QuoteRequest,
    RefineRequest,
    QuoteResult,
    QuoteResponse,
)
from .draft import FormDraft, DRAFT_SCHEMA_VERSION
from .catalog import AIModel, AI_MODELS
from .error import ErrorResponse

__all__ = [
    # Request / response models
    "ContentKind",
    "ContentSource",
    "InlineText",
    "DocumentPayload",
    "AudioPayload",
    "GenerationOptions",
    "QuoteRequest",
    "RefineRequest",
    "QuoteResult",
    "QuoteResponse",
    # Draft models
    "FormDraft",
    "DRAFT_SCHEMA_VERSION",
    # Model catalog
    "AIModel",
    "AI_MODELS",
    # Error models
    "ErrorResponse",
]
