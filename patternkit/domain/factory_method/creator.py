"""
Factory Method creators.

A creator variant supplies only ``factory_method``; ``some_operation`` is
shared behavior that works with whatever product the variant returns.
Adding a family means adding one Creator subclass and one Product subclass.
"""
from abc import ABC, abstractmethod

from patternkit.domain.factory_method.product import MacOS, Product, Windows


class Creator(ABC):
    """Base creator with the shared business logic."""

    @abstractmethod
    def factory_method(self) -> Product:
        """Create the product for this creator's family."""

    def some_operation(self) -> str:
        """
        Run the shared logic against a freshly created product.

        Returns:
            A message embedding the product's operation result.
        """
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class Microsoft(Creator):
    """Creator for the Windows product."""

    def factory_method(self) -> Product:
        return Windows()


class Apple(Creator):
    """Creator for the MacOS product."""

    def factory_method(self) -> Product:
        return MacOS()
