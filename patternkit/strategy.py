"""Interchangeable payment strategies used by a shopping cart."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


def _format_amount(amount: float) -> str:
    """Render a number the short way: whole values without a fractional part."""
    value = float(amount)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class PaymentStrategy(ABC):
    """A way of paying an amount."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Pay ``amount``, print a receipt line and return it."""


@dataclass
class CreditCardPayment(PaymentStrategy):
    """Payment charged to a credit card."""

    card_number: str

    def pay(self, amount: float) -> str:
        message = (
            f"Paid ${_format_amount(amount)} using Credit Card: {self.card_number}"
        )
        print(message)
        return message


class PixKeyType(Enum):
    """Kinds of key that identify a Pix account."""

    EMAIL = "EMAIL"
    CPF = "CPF"
    CNPJ = "CNPJ"
    RANDOM = "RANDOM"
    PHONE = "PHONE"

    def __str__(self) -> str:
        return self.value


@dataclass
class PixPayment(PaymentStrategy):
    """Instant payment addressed by a Pix key."""

    key: str
    key_type: PixKeyType

    def pay(self, amount: float) -> str:
        message = (
            f"Paid ${_format_amount(amount)} using Pix key: {self.key}, "
            f"of type: {self.key_type}"
        )
        print(message)
        return message


@dataclass
class ShoppingCart:
    """A cart that pays with whichever strategy it was given."""

    strategy: PaymentStrategy

    def checkout(self, amount: float) -> str:
        """Pay ``amount`` with the cart's strategy and return the receipt line."""
        return self.strategy.pay(amount)


def main(argv: list[str] | None = None) -> int:
    """Check out two carts, each with a different payment strategy."""
    argparse.ArgumentParser(description="Demonstrate payment strategies.").parse_args(
        argv
    )
    pix = PixPayment(key="buyer@example.com", key_type=PixKeyType.EMAIL)
    credit_card = CreditCardPayment(card_number="test-card")

    cart1 = ShoppingCart(pix)
    cart2 = ShoppingCart(credit_card)

    cart1.checkout(100.00)
    cart2.checkout(213.00)
    return 0