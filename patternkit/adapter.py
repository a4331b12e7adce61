"""Fitting square pegs into round holes through an adapter."""

from __future__ import annotations

import argparse
import math
from abc import ABC, abstractmethod


class RoundPeg(ABC):
    """Anything with a radius that can be tested against a round hole."""

    @abstractmethod
    def radius(self) -> float:
        """Return the peg's radius."""


class RoundHole:
    """A round hole of a given radius."""

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def fits(self, peg: RoundPeg) -> bool:
        """Return whether ``peg`` fits into this hole."""
        return peg.radius() <= self.radius


class SquarePeg:
    """A square peg described by its width."""

    def __init__(self, width: float) -> None:
        self.width = width


class SquarePegAdapter(RoundPeg):
    """Presents a square peg as the smallest round peg that encloses it."""

    def __init__(self, peg: SquarePeg) -> None:
        self.peg = peg

    def radius(self) -> float:
        return (self.peg.width * math.sqrt(2)) / 2.0


class SimpleRoundPeg(RoundPeg):
    """A plain round peg."""

    def __init__(self, radius: float) -> None:
        self._radius = radius

    def radius(self) -> float:
        return self._radius


def main(argv: list[str] | None = None) -> int:
    """Test a round peg and two adapted square pegs against one hole."""
    argparse.ArgumentParser(description="Demonstrate the adapter.").parse_args(argv)
    hole = RoundHole(5.0)
    round_peg = SimpleRoundPeg(5.0)
    small_square_peg = SquarePeg(5.0)
    large_square_peg = SquarePeg(8.0)

    print(f"Round peg fits? {str(hole.fits(round_peg)).lower()}")

    small_adapter = SquarePegAdapter(small_square_peg)
    print(f"Small square peg fits? {str(hole.fits(small_adapter)).lower()}")

    large_adapter = SquarePegAdapter(large_square_peg)
    print(f"Large square peg fits? {str(hole.fits(large_adapter)).lower()}")
    return 0