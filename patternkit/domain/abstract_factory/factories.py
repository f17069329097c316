"""Abstract Factory - one factory per product family.

A new family is one new AbstractFactory subclass plus its A and B products;
nothing existing changes.
"""
from abc import ABC, abstractmethod
from typing import Hashable, Tuple

from patternkit.domain.abstract_factory.products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
    ProductFamily,
)


class AbstractFactory(ABC):
    """Interface for factories producing a matched A/B pair."""

    @property
    @abstractmethod
    def family(self) -> Hashable:
        """Family of the products this factory creates."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """Create the A product of this factory's family."""

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """Create the B product of this factory's family."""


class ConcreteFactory1(AbstractFactory):
    family = ProductFamily.FAMILY_1

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    family = ProductFamily.FAMILY_2

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


def collaborate(factory: AbstractFactory) -> Tuple[str, str]:
    """
    Create both products from one factory and let B collaborate with A.

    Returns:
        ``(useful_function_b result, another_useful_function_b result)``
    """
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()
    return product_b.useful_function_b(), product_b.another_useful_function_b(product_a)
