"""Coffee whose price and description grow with each added ingredient."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _format_amount(amount: float) -> str:
    """Render a number the short way: whole values without a fractional part."""
    value = float(amount)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class Coffee(ABC):
    """A drink with a price and a description."""

    @abstractmethod
    def cost(self) -> float:
        """Return the price."""

    @abstractmethod
    def description(self) -> str:
        """Return a human-readable description."""


class SimpleCoffee(Coffee):
    """Plain coffee."""

    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "Simple Coffee"


@dataclass
class WithMilk(Coffee):
    """Adds milk to another coffee."""

    coffee: Coffee

    def cost(self) -> float:
        return self.coffee.cost() + 0.5

    def description(self) -> str:
        return f"{self.coffee.description()} + Milk"


@dataclass
class WithSugar(Coffee):
    """Adds sugar to another coffee."""

    coffee: Coffee

    def cost(self) -> float:
        return self.coffee.cost() + 0.2

    def description(self) -> str:
        return f"{self.coffee.description()} + Sugar"


def main(argv: list[str] | None = None) -> int:
    """Print a coffee with milk and sugar and its price."""
    argparse.ArgumentParser(description="Demonstrate the decorator.").parse_args(argv)
    coffee = WithSugar(WithMilk(SimpleCoffee()))
    print(f"{coffee.description()}: R${_format_amount(coffee.cost())}")
    return 0