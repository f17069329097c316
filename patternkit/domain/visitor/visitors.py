"""
Visitors - operations over the component variants via double dispatch.

Handlers are abstract, so a visitor missing one cannot be instantiated.
There is no fallback handler.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List

from patternkit.domain.base.exceptions import UnsupportedVariantError
from patternkit.domain.visitor.components import (
    Component,
    ConcreteComponentA,
    ConcreteComponentB,
)


class Visitor(ABC):
    """One handler per component variant."""

    @abstractmethod
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        """Handle a ConcreteComponentA."""

    @abstractmethod
    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        """Handle a ConcreteComponentB."""


class ConcreteVisitor1(Visitor):

    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor1"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor1"


class ConcreteVisitor2(Visitor):

    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor2"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor2"


def visit_all(components: Iterable[Component], visitor: Visitor) -> List[str]:
    """
    Apply one visitor to every component, in sequence order.

    Args:
        components: Components to traverse
        visitor: Visitor to dispatch to

    Returns:
        Handler results, one per component, in the same order

    Raises:
        UnsupportedVariantError: If an item is not a Component, or the
            visitor has no handler for its variant
    """
    results = []
    for component in components:
        if not isinstance(component, Component):
            raise UnsupportedVariantError(
                type(component).__name__,
                f"{type(component).__name__} is not a visitable component",
            )
        try:
            results.append(component.accept(visitor))
        except AttributeError as e:
            if e.obj is not visitor or not (e.name or "").startswith("visit_"):
                raise
            raise UnsupportedVariantError(
                type(component).__name__,
                f"{type(visitor).__name__} has no handler {e.name} "
                f"for {type(component).__name__}",
            ) from e
    return results


class ObjectStructure:
    """Ordered, mutable collection of components. Not thread-safe."""

    def __init__(self, components: Iterable[Component] = ()):
        self._components: List[Component] = list(components)

    def attach(self, component: Component) -> None:
        self._components.append(component)

    def detach(self, component: Component) -> None:
        self._components.remove(component)

    @property
    def components(self) -> List[Component]:
        return list(self._components)

    def accept(self, visitor: Visitor) -> List[str]:
        return visit_all(self._components, visitor)

    def __len__(self) -> int:
        return len(self._components)
