"""Builder - stepwise product construction with reusable director recipes."""

from .builder import Builder, BuilderState, ConcreteBuilder1
from .director import Director
from .product import BuiltProduct

__all__ = [
    "Builder",
    "BuilderState",
    "ConcreteBuilder1",
    "Director",
    "BuiltProduct",
]
