"""API endpoints package."""

from . import health
from . import quote
from . import models
from . import drafts

__all__ = ["health", "quote", "models", "drafts"]
