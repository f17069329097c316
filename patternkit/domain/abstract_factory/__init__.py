"""Abstract Factory - matched families of interoperable products."""

from .factories import AbstractFactory, ConcreteFactory1, ConcreteFactory2, collaborate
from .products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
    ProductFamily,
)

__all__ = [
    # Factories
    "AbstractFactory",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "collaborate",
    # Products
    "ProductFamily",
    "AbstractProductA",
    "AbstractProductB",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
]
