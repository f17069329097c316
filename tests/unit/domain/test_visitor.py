"""Tests for visitor double dispatch."""

from unittest.mock import Mock

import pytest

from patternkit.domain.base.exceptions import UnsupportedVariantError
from patternkit.domain.visitor import (
    Component,
    ConcreteComponentA,
    ConcreteComponentB,
    ConcreteVisitor1,
    ConcreteVisitor2,
    ObjectStructure,
    Visitor,
    visit_all,
)


class TestDoubleDispatch:
    """Test accept routes to the handler of the element's own variant."""

    def setup_method(self):
        """Set up test fixtures."""
        self.components = [ConcreteComponentA(), ConcreteComponentB()]

    def test_accept_calls_matching_handler(self):
        """Test each variant calls exactly its own handler."""
        visitor = Mock(spec=Visitor)
        component_a, component_b = self.components

        component_a.accept(visitor)
        visitor.visit_concrete_component_a.assert_called_once_with(component_a)
        visitor.visit_concrete_component_b.assert_not_called()

        component_b.accept(visitor)
        visitor.visit_concrete_component_b.assert_called_once_with(component_b)
        visitor.visit_concrete_component_a.assert_called_once()

    def test_visitor_1_results(self):
        assert visit_all(self.components, ConcreteVisitor1()) == [
            "A + ConcreteVisitor1",
            "B + ConcreteVisitor1",
        ]

    def test_visitor_2_results(self):
        assert visit_all(self.components, ConcreteVisitor2()) == [
            "A + ConcreteVisitor2",
            "B + ConcreteVisitor2",
        ]

    def test_visitors_do_not_interfere(self):
        """Test two visitors over the same elements give independent results."""
        first = visit_all(self.components, ConcreteVisitor1())
        second = visit_all(self.components, ConcreteVisitor2())

        assert visit_all(self.components, ConcreteVisitor1()) == first
        assert first != second

    def test_traversal_keeps_sequence_order(self):
        """Test no element is skipped or reordered."""
        components = [ConcreteComponentB(), ConcreteComponentA(), ConcreteComponentB()]

        assert visit_all(components, ConcreteVisitor1()) == [
            "B + ConcreteVisitor1",
            "A + ConcreteVisitor1",
            "B + ConcreteVisitor1",
        ]

    def test_traversal_of_empty_sequence(self):
        assert visit_all([], ConcreteVisitor1()) == []

    def test_non_component_rejected(self):
        """Test an item outside the variant set raises explicitly."""
        with pytest.raises(UnsupportedVariantError, match="not a visitable component"):
            visit_all([ConcreteComponentA(), "not a component"], ConcreteVisitor1())

    def test_unknown_component_variant_rejected(self):
        """Test a component the visitor has no handler for raises explicitly."""

        class ConcreteComponentC(Component):
            def accept(self, visitor):
                return visitor.visit_concrete_component_c(self)

        with pytest.raises(UnsupportedVariantError, match="visit_concrete_component_c") as exc:
            visit_all([ConcreteComponentA(), ConcreteComponentC()], ConcreteVisitor1())

        assert exc.value.variant == "ConcreteComponentC"

    def test_unknown_component_variant_through_dispatch_helper(self):
        """Test the shared dispatch helper rejects a missing handler."""

        class ConcreteComponentC(Component):
            def accept(self, visitor):
                return self._dispatch(visitor, "visit_concrete_component_c")

        with pytest.raises(UnsupportedVariantError, match="has no handler"):
            ConcreteComponentC().accept(ConcreteVisitor2())

    def test_handler_attribute_error_is_not_masked(self):
        """Test an AttributeError raised inside a handler propagates unchanged."""

        class BrokenVisitor(ConcreteVisitor1):
            def visit_concrete_component_a(self, element):
                return element.missing_attribute

        with pytest.raises(AttributeError, match="missing_attribute"):
            visit_all([ConcreteComponentA()], BrokenVisitor())

    def test_visitor_missing_handler_cannot_be_instantiated(self):
        """Test exhaustiveness is enforced at construction time."""

        class PartialVisitor(Visitor):
            def visit_concrete_component_a(self, element):
                return "A only"

        with pytest.raises(TypeError):
            PartialVisitor()


class TestObjectStructure:
    """Test the component collection."""

    def test_attach_detach_accept(self):
        component_a = ConcreteComponentA()
        component_b = ConcreteComponentB()
        structure = ObjectStructure([component_a])

        structure.attach(component_b)
        assert len(structure) == 2
        assert structure.accept(ConcreteVisitor2()) == [
            "A + ConcreteVisitor2",
            "B + ConcreteVisitor2",
        ]

        structure.detach(component_a)
        assert structure.components == [component_b]
        assert structure.accept(ConcreteVisitor1()) == ["B + ConcreteVisitor1"]

    def test_components_returns_copy(self):
        structure = ObjectStructure([ConcreteComponentA()])

        structure.components.clear()

        assert len(structure) == 1
