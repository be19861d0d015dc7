"""Mediator centralises communication between objects so they do not refer
to each other directly. Customers never talk to one another; every order
goes through the official dealer, which also keeps the customer list."""

from __future__ import annotations

from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class OfficialDealer:
    def __init__(self) -> None:
        self.customers: List[str] = []

    def order_auto(self, customer: "Customer", auto: str, info: str) -> str:
        self.add_to_customers_list(customer.name)
        return f"Order name: {customer.name}. Order car is {auto}. Additional info: {info}"

    def add_to_customers_list(self, name: str) -> None:
        if name not in self.customers:
            self.customers.append(name)

    def get_customer_list(self) -> List[str]:
        return list(self.customers)


class Customer:
    def __init__(self, name: str, dealer: OfficialDealer) -> None:
        self.name = name
        self.dealer = dealer

    def make_order(self, auto: str, info: str) -> str:
        return self.dealer.order_auto(self, auto, info)


@pattern(
    key="mediator",
    name="Mediator",
    category=PatternCategory.behavioral,
    expected_output=[
        "Order name: Mike. Order car is Tesla. Additional info: with autopilot",
        "Order name: Jane. Order car is BMW. Additional info: with parktronic",
        "Customers: Mike, Jane",
    ],
)
def demo(emit: Callable[[str], None] = print) -> None:
    dealer = OfficialDealer()
    mike = Customer("Mike", dealer)
    jane = Customer("Jane", dealer)

    emit(mike.make_order("Tesla", "with autopilot"))
    emit(jane.make_order("BMW", "with parktronic"))
    emit(f"Customers: {', '.join(dealer.get_customer_list())}")
