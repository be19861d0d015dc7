"""Chain of Responsibility passes a request along a chain of handlers until
one of them deals with it. Each account tries to pay; when its balance is
too low it hands the payment to the next account in the chain."""

from __future__ import annotations

from typing import Callable, Optional

from pattern_catalog.catalog import PatternCategory, pattern


class Account:
    name = "Account"

    def __init__(self, balance: int) -> None:
        self.balance = balance
        self.incomer: Optional[Account] = None

    def set_next(self, account: "Account") -> "Account":
        self.incomer = account
        return account

    def can_pay(self, amount: int) -> bool:
        return self.balance >= amount

    def pay(self, amount: int, emit: Callable[[str], None] = print) -> None:
        if self.can_pay(amount):
            self.balance -= amount
            emit(f"Paid {amount} using {self.name}")
            return
        emit(f"Can't pay using {self.name}")
        if self.incomer is not None:
            self.incomer.pay(amount, emit)
        else:
            emit("Unfortunately, not enough money")


class Master(Account):
    name = "Master"


class Paypal(Account):
    name = "Paypal"


class Qiwi(Account):
    name = "Qiwi"


@pattern(
    key="chain-of-responsibility",
    name="Chain of Responsibility",
    category=PatternCategory.behavioral,
    expected_output=["Can't pay using Master", "Can't pay using Paypal", "Paid 600 using Qiwi"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    master = Master(100)
    paypal = Paypal(200)
    qiwi = Qiwi(1000)

    master.set_next(paypal).set_next(qiwi)
    master.pay(600, emit)
