"""Tests for the Factory Method creators and products."""

import pytest

from patternkit.domain.factory_method import Apple, Creator, MacOS, Microsoft, Product, Windows


class TestCreators:
    """Test creator variants and the shared operation."""

    @pytest.mark.parametrize(
        "creator, product_type",
        [(Microsoft(), Windows), (Apple(), MacOS)],
    )
    def test_factory_method_returns_variant_product(self, creator, product_type):
        """Test each creator produces its own product variant."""
        product = creator.factory_method()

        assert isinstance(product, Product)
        assert isinstance(product, product_type)

    @pytest.mark.parametrize("creator", [Microsoft(), Apple()])
    def test_some_operation_embeds_product_result(self, creator):
        """Test the shared operation contains the product's operation result."""
        expected = creator.factory_method().operation()

        assert expected in creator.some_operation()

    def test_some_operation_message(self):
        """Test the exact message of the shared operation."""
        assert Microsoft().some_operation() == (
            "Creator: The same creator's code has just worked with {Result of the Windows}"
        )
        assert Apple().some_operation().endswith("{Result of the MacOS}")

    def test_factory_method_creates_fresh_products(self):
        """Test every call creates a new product."""
        creator = Apple()

        assert creator.factory_method() is not creator.factory_method()

    def test_new_variant_only_supplies_factory_method(self):
        """Test a new family reuses the shared operation unchanged."""

        class Linux(Product):
            def operation(self):
                return "{Result of the Linux}"

        class Community(Creator):
            def factory_method(self):
                return Linux()

        assert Community().some_operation() == (
            "Creator: The same creator's code has just worked with {Result of the Linux}"
        )

    def test_creator_without_factory_method_cannot_be_instantiated(self):
        """Test the factory method is mandatory for every variant."""

        class Incomplete(Creator):
            pass

        with pytest.raises(TypeError):
            Incomplete()
