"""Builder separates the construction of a complex object from its
representation. Options are added one step at a time through a chainable
interface and the finished car is produced by a final ``build()`` call."""

from __future__ import annotations

from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class Car:
    def __init__(self, name: str) -> None:
        self.name = name
        self.autopilot = False
        self.parktronic = False
        self.signaling = False
        self.engine = "V6"

    def __str__(self) -> str:
        return (
            f"{self.name}: autopilot={self.autopilot}, parktronic={self.parktronic}, "
            f"signaling={self.signaling}, engine={self.engine}"
        )


class CarBuilder:
    def __init__(self, name: str) -> None:
        self._car = Car(name)

    def add_autopilot(self, autopilot: bool = True) -> "CarBuilder":
        self._car.autopilot = autopilot
        return self

    def add_parktronic(self, parktronic: bool = True) -> "CarBuilder":
        self._car.parktronic = parktronic
        return self

    def add_signaling(self, signaling: bool = True) -> "CarBuilder":
        self._car.signaling = signaling
        return self

    def update_engine(self, engine: str) -> "CarBuilder":
        self._car.engine = engine
        return self

    def build(self) -> Car:
        return self._car


@pattern(
    key="builder",
    name="Builder",
    category=PatternCategory.creational,
    expected_output=["Tesla: autopilot=True, parktronic=True, signaling=False, engine=V8"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    car = CarBuilder("Tesla").add_autopilot().add_parktronic().update_engine("V8").build()
    emit(str(car))
