"""Strategy defines a family of interchangeable algorithms and lets the
client pick one at runtime. The cart delegates its discount to whichever
strategy function it currently holds."""

from __future__ import annotations

from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern

Discount = Callable[[int], int]


def base_strategy(amount: int) -> int:
    return amount


def premium_strategy(amount: int) -> int:
    return amount * 85 // 100


def platinum_strategy(amount: int) -> int:
    return amount * 65 // 100


class AutoCart:
    def __init__(self, discount: Discount) -> None:
        self.discount = discount
        self.amount = 0

    def checkout(self) -> int:
        return self.discount(self.amount)

    def set_amount(self, amount: int) -> None:
        self.amount = amount


@pattern(
    key="strategy",
    name="Strategy",
    category=PatternCategory.behavioral,
    expected_output=["50000", "42500", "32500"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    cart = AutoCart(base_strategy)
    cart.set_amount(50000)
    emit(str(cart.checkout()))

    cart.discount = premium_strategy
    emit(str(cart.checkout()))

    cart.discount = platinum_strategy
    emit(str(cart.checkout()))
