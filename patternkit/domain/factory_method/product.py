"""Factory Method products - the artifacts a creator hands out."""
from abc import ABC, abstractmethod


class Product(ABC):
    """Interface every concrete product implements. Stateless."""

    @abstractmethod
    def operation(self) -> str:
        """Return this product's result."""


class Windows(Product):
    """Product made by the Microsoft creator."""

    def operation(self) -> str:
        return "{Result of the Windows}"


class MacOS(Product):
    """Product made by the Apple creator."""

    def operation(self) -> str:
        return "{Result of the MacOS}"
