"""Layer 2: Quote Generation - extracted text + price list to sales proposal."""

from .quote_generator import QuoteGenerator, build_quote_prompt, build_client_info
from .models import VariantContext

__all__ = [
    "QuoteGenerator",
    "build_quote_prompt",
    "build_client_info",
    "VariantContext",
]
