"""Visitor targets - a closed set of component variants.

Each variant's ``accept`` calls the visitor handler named after that
variant. Adding a variant means adding a handler to Visitor and to every
concrete visitor.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from patternkit.domain.base.exceptions import UnsupportedVariantError

if TYPE_CHECKING:
    from patternkit.domain.visitor.visitors import Visitor


class Component(ABC):
    """Interface for elements a visitor can traverse."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> str:
        """Route to the visitor handler for this variant and return its result."""

    def _dispatch(self, visitor: Visitor, handler_name: str) -> str:
        """
        Call the visitor's handler for this variant.

        Raises:
            UnsupportedVariantError: If the visitor has no such handler
        """
        handler = getattr(visitor, handler_name, None)
        if handler is None:
            raise UnsupportedVariantError(
                type(self).__name__,
                f"{type(visitor).__name__} has no handler {handler_name} "
                f"for {type(self).__name__}",
            )
        return handler(self)


class ConcreteComponentA(Component):

    def accept(self, visitor: Visitor) -> str:
        return self._dispatch(visitor, "visit_concrete_component_a")

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):

    def accept(self, visitor: Visitor) -> str:
        return self._dispatch(visitor, "visit_concrete_component_b")

    def special_method_of_concrete_component_b(self) -> str:
        return "B"
