"""Layer 1: Content Extraction - audio / document / text to plain text."""

from .extractor import ContentExtractor

__all__ = ["ContentExtractor"]
