"""Factory Method - deferred construction through an overridable factory method."""

from .creator import Apple, Creator, Microsoft
from .product import MacOS, Product, Windows

__all__ = [
    "Creator",
    "Microsoft",
    "Apple",
    "Product",
    "Windows",
    "MacOS",
]
