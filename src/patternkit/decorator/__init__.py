"""Decorator example: coffee with layered add-ons."""

from .coffee import (
    Coffee,
    CoffeeAddition,
    CoffeeDecorator,
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
    make_coffee,
)

__all__ = [
    "Coffee",
    "SimpleCoffee",
    "CoffeeDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "CoffeeAddition",
    "make_coffee",
]
