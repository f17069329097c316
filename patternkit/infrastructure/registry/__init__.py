"""Registry package for pattern variants."""

from .variant_registry import PatternKind, VariantRegistration, VariantRegistry, default_registry

__all__ = [
    "PatternKind",
    "VariantRegistration",
    "VariantRegistry",
    "default_registry",
]
