"""Processing layers for quote generation pipeline."""

# Note: Import layers individually to avoid circular imports
# Use: from app.layers.layer1_extraction import ContentExtractor
# Use: from app.layers.layer2_generation import QuoteGenerator

__all__ = [
    "layer1_extraction",
    "layer2_generation",
]
