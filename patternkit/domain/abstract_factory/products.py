"""Abstract Factory products.

Every product is tagged with the family it belongs to. Collaboration is
defined only between products of the same family. A family tag is any
hashable key; the shipped families use ProductFamily, a new family can use
its own key without touching it.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Hashable

from patternkit.domain.base.exceptions import CrossFamilyCollaborationError


class ProductFamily(str, Enum):
    """Shipped product families."""
    FAMILY_1 = "family-1"
    FAMILY_2 = "family-2"


class AbstractProductA(ABC):
    """Interface for products of kind A."""

    @property
    @abstractmethod
    def family(self) -> Hashable:
        """Family this product belongs to."""

    @abstractmethod
    def useful_function_a(self) -> str:
        """Return this product's result."""


class ConcreteProductA1(AbstractProductA):
    family = ProductFamily.FAMILY_1

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    family = ProductFamily.FAMILY_2

    def useful_function_a(self) -> str:
        return "The result of the product A2."


class AbstractProductB(ABC):
    """
    Interface for products of kind B.

    B products can work on their own and can collaborate with an A product
    of their own family.
    """

    @property
    @abstractmethod
    def family(self) -> Hashable:
        """Family this product belongs to."""

    @abstractmethod
    def useful_function_b(self) -> str:
        """Return this product's result."""

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        Collaborate with an A product.

        Args:
            collaborator: An A product created by the same factory

        Returns:
            The collaboration result

        Raises:
            CrossFamilyCollaborationError: If the collaborator is from another family
        """
        self.ensure_compatible(collaborator)
        return self._collaborate(collaborator.useful_function_a())

    def ensure_compatible(self, collaborator: AbstractProductA) -> None:
        """Reject a collaborator that does not belong to this product's family."""
        actual = getattr(collaborator, "family", None)
        if actual is None or actual != self.family:
            raise CrossFamilyCollaborationError(self.family, actual)

    @abstractmethod
    def _collaborate(self, result: str) -> str:
        """Combine the collaborator's result with this product's."""


class ConcreteProductB1(AbstractProductB):
    family = ProductFamily.FAMILY_1

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def _collaborate(self, result: str) -> str:
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    family = ProductFamily.FAMILY_2

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def _collaborate(self, result: str) -> str:
        return f"The result of the B2 collaborating with the ({result})"
