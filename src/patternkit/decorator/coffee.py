"""Coffee decorators layering add-ons over a base coffee."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Type, Union

from patternkit.domain.exceptions import UnknownAdditionError


class Coffee(ABC):
    """Capability shared by base coffees and every decorator."""

    @abstractmethod
    def get_description(self) -> str:
        """Human-readable description."""

    @abstractmethod
    def get_cost(self) -> float:
        """Total cost."""


class SimpleCoffee(Coffee):
    def get_description(self) -> str:
        return "Simple coffee"

    def get_cost(self) -> float:
        return 5.0


class CoffeeDecorator(Coffee):
    """
    Wraps exactly one coffee, appending ``suffix`` to its description and
    adding ``increment`` to its cost.

    Concrete decorators only set the two class attributes.
    """

    suffix: str = ""
    increment: float = 0.0

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    @property
    def wrapped(self) -> Coffee:
        return self._coffee

    def get_description(self) -> str:
        return self._coffee.get_description() + self.suffix

    def get_cost(self) -> float:
        return self._coffee.get_cost() + self.increment


class MilkDecorator(CoffeeDecorator):
    suffix = ", with Milk"
    increment = 1.5


class SugarDecorator(CoffeeDecorator):
    suffix = ", with Sugar"
    increment = 0.5


class CoffeeAddition(str, Enum):
    """Add-ons available to ``make_coffee``."""

    MILK = "milk"
    SUGAR = "sugar"


_DECORATORS = {
    CoffeeAddition.MILK: MilkDecorator,
    CoffeeAddition.SUGAR: SugarDecorator,
}


def _decorator_for(addition: Union[CoffeeAddition, str]) -> Type[CoffeeDecorator]:
    if isinstance(addition, CoffeeAddition):
        return _DECORATORS[addition]
    try:
        return _DECORATORS[CoffeeAddition(addition.strip().lower())]
    except (ValueError, AttributeError):
        raise UnknownAdditionError(str(addition)) from None


def make_coffee(additions: Iterable[Union[CoffeeAddition, str]] = ()) -> Coffee:
    """
    Build a coffee by wrapping ``SimpleCoffee`` with each addition in order.

    ``make_coffee(["milk", "sugar"])`` is ``SugarDecorator(MilkDecorator(SimpleCoffee()))``.

    Raises:
        UnknownAdditionError: If an addition name is not recognised
    """
    coffee: Coffee = SimpleCoffee()
    for addition in additions:
        coffee = _decorator_for(addition)(coffee)
    return coffee
