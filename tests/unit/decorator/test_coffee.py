"""Tests for the coffee decorator chain."""

import pytest

from patternkit.decorator import (
    Coffee,
    CoffeeAddition,
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
    make_coffee,
)
from patternkit.domain.exceptions import UnknownAdditionError


class TestCoffeeDecorators:
    """Test cost and description aggregation."""

    def test_simple_coffee(self):
        coffee = SimpleCoffee()

        assert coffee.get_description() == "Simple coffee"
        assert coffee.get_cost() == 5.0

    def test_milk_then_sugar(self):
        coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))

        assert coffee.get_description() == "Simple coffee, with Milk, with Sugar"
        assert coffee.get_cost() == 7.0

    def test_sugar_then_milk(self):
        coffee = MilkDecorator(SugarDecorator(SimpleCoffee()))

        assert coffee.get_description() == "Simple coffee, with Sugar, with Milk"
        assert coffee.get_cost() == 7.0

    def test_single_layers(self):
        assert MilkDecorator(SimpleCoffee()).get_cost() == 6.5
        assert SugarDecorator(SimpleCoffee()).get_cost() == 5.5

    def test_repeated_layers_accumulate(self):
        coffee = MilkDecorator(MilkDecorator(SimpleCoffee()))

        assert coffee.get_description() == "Simple coffee, with Milk, with Milk"
        assert coffee.get_cost() == 8.0

    def test_deep_chain(self):
        coffee: Coffee = SimpleCoffee()
        for _ in range(50):
            coffee = SugarDecorator(coffee)

        assert coffee.get_cost() == pytest.approx(30.0)
        assert coffee.get_description().count(", with Sugar") == 50

    def test_decorator_wraps_any_coffee(self):
        class Espresso(Coffee):
            def get_description(self):
                return "Espresso"

            def get_cost(self):
                return 3.0

        coffee = MilkDecorator(Espresso())

        assert coffee.get_description() == "Espresso, with Milk"
        assert coffee.get_cost() == 4.5
        assert isinstance(coffee.wrapped, Espresso)


class TestMakeCoffee:
    """Test building chains from addition names."""

    def test_no_additions(self):
        coffee = make_coffee()

        assert type(coffee) is SimpleCoffee

    def test_additions_applied_in_order(self):
        coffee = make_coffee(["milk", "sugar"])

        assert isinstance(coffee, SugarDecorator)
        assert isinstance(coffee.wrapped, MilkDecorator)
        assert coffee.get_description() == "Simple coffee, with Milk, with Sugar"

    def test_enum_and_mixed_case_names(self):
        coffee = make_coffee([CoffeeAddition.SUGAR, " Milk "])

        assert coffee.get_description() == "Simple coffee, with Sugar, with Milk"
        assert coffee.get_cost() == 7.0

    def test_unknown_addition_raises(self):
        with pytest.raises(UnknownAdditionError, match="caramel"):
            make_coffee(["milk", "caramel"])
