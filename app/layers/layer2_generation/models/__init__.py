from .variant import VariantContext

__all__ = ["VariantContext"]
