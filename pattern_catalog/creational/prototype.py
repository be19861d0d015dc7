"""Prototype creates new objects by copying an existing instance. The
prototype car carries its configuration, and every car produced from it
starts with the same values while being an independent object."""

from __future__ import annotations

import copy
from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class TeslaCar:
    def __init__(self, model: str, price: int, interior: str, autopilot: bool) -> None:
        self.model = model
        self.price = price
        self.interior = interior
        self.autopilot = autopilot

    def produce(self) -> "TeslaCar":
        return copy.copy(self)

    def __str__(self) -> str:
        return f"{self.model} {self.price} {self.interior}"


@pattern(
    key="prototype",
    name="Prototype",
    category=PatternCategory.creational,
    expected_output=["Model S 80000 red", "Model S 80000 red", "clone is a new object: True"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    prototype = TeslaCar("Model S", 80000, "red", False)
    car = prototype.produce()
    emit(str(prototype))
    emit(str(car))
    emit(f"clone is a new object: {car is not prototype}")
