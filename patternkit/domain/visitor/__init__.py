"""Visitor - operations over a closed set of component variants."""

from .components import Component, ConcreteComponentA, ConcreteComponentB
from .visitors import ConcreteVisitor1, ConcreteVisitor2, ObjectStructure, Visitor, visit_all

__all__ = [
    # Components
    "Component",
    "ConcreteComponentA",
    "ConcreteComponentB",
    # Visitors
    "Visitor",
    "ConcreteVisitor1",
    "ConcreteVisitor2",
    "visit_all",
    "ObjectStructure",
]
