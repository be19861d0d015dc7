"""Factory Method moves object creation into a dedicated method, so callers
ask for a kind of product and receive a ready instance without knowing which
class implements it."""

from __future__ import annotations

from typing import Callable, Dict, Type

from pattern_catalog.catalog import PatternCategory, pattern
from pattern_catalog.errors import UnknownProductError


class Car:
    brand = ""
    model = ""

    def __str__(self) -> str:
        return f"{self.brand} {self.model}"


class Tesla(Car):
    brand = "Tesla"
    model = "Model 3"


class Bmw(Car):
    brand = "BMW"
    model = "X5"


class Audi(Car):
    brand = "Audi"
    model = "A8"


class CarFactory:
    products: Dict[str, Type[Car]] = {
        "tesla": Tesla,
        "bmw": Bmw,
        "audi": Audi,
    }

    def create(self, kind: str) -> Car:
        try:
            product = self.products[kind.lower()]
        except KeyError:
            raise UnknownProductError(kind) from None
        return product()


@pattern(
    key="factory-method",
    name="Factory Method",
    category=PatternCategory.creational,
    expected_output=["Tesla Model 3", "BMW X5", "Audi A8"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    factory = CarFactory()
    for kind in ("tesla", "bmw", "audi"):
        emit(str(factory.create(kind)))
