"""Decorator attaches extra behavior to an object by wrapping it in another
object with the same interface. Each option wraps the car, adds to its price
and extends its description, and options stack in any order."""

from __future__ import annotations

from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class Car:
    def __init__(self) -> None:
        self.price = 10000
        self.model = "Car"

    def get_price(self) -> int:
        return self.price

    def get_description(self) -> str:
        return self.model


class Tesla(Car):
    def __init__(self) -> None:
        super().__init__()
        self.price = 25000
        self.model = "Tesla"


class Autopilot:
    def __init__(self, car) -> None:
        self.car = car

    def get_price(self) -> int:
        return self.car.get_price() + 5000

    def get_description(self) -> str:
        return f"{self.car.get_description()} with autopilot"


class Parktronic:
    def __init__(self, car) -> None:
        self.car = car

    def get_price(self) -> int:
        return self.car.get_price() + 3000

    def get_description(self) -> str:
        return f"{self.car.get_description()} with parktronic"


@pattern(
    key="decorator",
    name="Decorator",
    category=PatternCategory.structural,
    expected_output=["33000 Tesla with autopilot with parktronic", "30000 Tesla with autopilot"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    tesla = Parktronic(Autopilot(Tesla()))
    emit(f"{tesla.get_price()} {tesla.get_description()}")

    tesla2 = Autopilot(Tesla())
    emit(f"{tesla2.get_price()} {tesla2.get_description()}")
