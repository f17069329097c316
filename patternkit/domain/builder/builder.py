"""
Builders - stepwise, resettable accumulation of a product.

A builder owns its in-progress product exclusively. ``retrieve_product``
hands that product over and resets the builder, so the returned object
never grows through later builder calls. Builders are not safe for
concurrent use without external synchronization.
"""
from abc import ABC, abstractmethod
from enum import Enum

from patternkit.domain.builder.product import BuiltProduct
from patternkit.infrastructure.logging import get_logger


class BuilderState(str, Enum):
    """Builder state enumeration."""
    EMPTY = "empty"
    ACCUMULATING = "accumulating"


class Builder(ABC):
    """Interface for the construction steps a director can drive."""

    @abstractmethod
    def produce_part_a(self) -> None:
        """Add part A."""

    @abstractmethod
    def produce_part_b(self) -> None:
        """Add part B."""

    @abstractmethod
    def produce_part_c(self) -> None:
        """Add part C."""


class ConcreteBuilder1(Builder):
    """Builder that labels its parts PartA1, PartB1 and PartC1."""

    def __init__(self):
        self.logger = get_logger(__name__)
        self._product = BuiltProduct()

    @property
    def state(self) -> BuilderState:
        """Current state of the in-progress product."""
        if self._product.is_empty():
            return BuilderState.EMPTY
        return BuilderState.ACCUMULATING

    def reset(self) -> None:
        """Drop accumulated parts and start a fresh product."""
        self._product = BuiltProduct()
        self.logger.debug("Builder reset", builder=self.__class__.__name__)

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")

    def retrieve_product(self) -> BuiltProduct:
        """
        Hand over the accumulated product and reset the builder.

        Retrieving with nothing accumulated returns an empty product.
        """
        result = self._product
        self.reset()
        return result
