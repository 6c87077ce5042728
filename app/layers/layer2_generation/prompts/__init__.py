from .quote_prompts import (
    DEFAULT_QUOTE_TEMPLATE,
    VARIANT_HINT,
    CLIENT_INFO_TEMPLATE,
    TRANSCRIPT_SECTION,
    PRICE_LIST_SECTION,
    MARKDOWN_FORMAT_INSTRUCTIONS,
    PLAIN_TEXT_FORMAT_INSTRUCTIONS,
    MARKDOWN_SYSTEM_PROMPT,
    PLAIN_TEXT_SYSTEM_PROMPT,
    REVISION_TEMPLATE,
    REVISION_REQUEST_TEMPLATE,
)

__all__ = [
    "DEFAULT_QUOTE_TEMPLATE",
    "VARIANT_HINT",
    "CLIENT_INFO_TEMPLATE",
    "TRANSCRIPT_SECTION",
    "PRICE_LIST_SECTION",
    "MARKDOWN_FORMAT_INSTRUCTIONS",
    "PLAIN_TEXT_FORMAT_INSTRUCTIONS",
    "MARKDOWN_SYSTEM_PROMPT",
    "PLAIN_TEXT_SYSTEM_PROMPT",
    "REVISION_TEMPLATE",
    "REVISION_REQUEST_TEMPLATE",
]
