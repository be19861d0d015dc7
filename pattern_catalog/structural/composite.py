"""Composite arranges objects into tree structures and lets clients treat a
single part and a group of parts the same way. A car is equipment made of
other equipment, and asking it for its price sums up everything inside."""

from __future__ import annotations

from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class Equipment:
    def __init__(self, name: str, price: int = 0) -> None:
        self.name = name
        self.price = price

    def get_price(self) -> int:
        return self.price


class Engine(Equipment):
    def __init__(self) -> None:
        super().__init__("engine", 20000)


class Body(Equipment):
    def __init__(self) -> None:
        super().__init__("body", 10000)


class Tools(Equipment):
    def __init__(self) -> None:
        super().__init__("tools", 4000)


class Composite(Equipment):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.equipments: List[Equipment] = []

    def add(self, equipment: Equipment) -> None:
        self.equipments.append(equipment)

    def get_price(self) -> int:
        return sum(e.get_price() for e in self.equipments)

    def part_names(self) -> List[str]:
        return [e.name for e in self.equipments]


class Car(Composite):
    def __init__(self) -> None:
        super().__init__("car")


@pattern(
    key="composite",
    name="Composite",
    category=PatternCategory.structural,
    expected_output=["Car parts: engine, body, tools", "Total price: 34000"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    car = Car()
    car.add(Engine())
    car.add(Body())
    car.add(Tools())
    emit(f"Car parts: {', '.join(car.part_names())}")
    emit(f"Total price: {car.get_price()}")
