"""Abstract Factory provides an interface for creating families of related
objects without naming their concrete classes. Each brand's factory builds a
car together with the engine that belongs to it, so a Tesla never ends up
with a petrol engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Type

from pattern_catalog.catalog import PatternCategory, pattern
from pattern_catalog.errors import UnknownProductError


class Engine(ABC):
    kind: str


class ElectricEngine(Engine):
    kind = "electric"


class PetrolEngine(Engine):
    kind = "petrol"


class Car:
    def __init__(self, model: str, engine: Engine) -> None:
        self.model = model
        self.engine = engine

    def describe(self) -> str:
        return f"{self.model} with {self.engine.kind} engine"


class CarFactory(ABC):
    @abstractmethod
    def create_engine(self) -> Engine: ...

    @abstractmethod
    def create_car(self, engine: Engine) -> Car: ...

    def assemble(self) -> Car:
        return self.create_car(self.create_engine())


class TeslaFactory(CarFactory):
    def create_engine(self) -> Engine:
        return ElectricEngine()

    def create_car(self, engine: Engine) -> Car:
        return Car("Tesla Model S", engine)


class BmwFactory(CarFactory):
    def create_engine(self) -> Engine:
        return PetrolEngine()

    def create_car(self, engine: Engine) -> Car:
        return Car("BMW X5", engine)


FACTORIES: Dict[str, Type[CarFactory]] = {
    "tesla": TeslaFactory,
    "bmw": BmwFactory,
}


def get_factory(brand: str) -> CarFactory:
    try:
        return FACTORIES[brand.lower()]()
    except KeyError:
        raise UnknownProductError(brand) from None


@pattern(
    key="abstract-factory",
    name="Abstract Factory",
    category=PatternCategory.creational,
    expected_output=[
        "Tesla Model S with electric engine",
        "BMW X5 with petrol engine",
    ],
)
def demo(emit: Callable[[str], None] = print) -> None:
    for brand in ("tesla", "bmw"):
        car = get_factory(brand).assemble()
        emit(car.describe())
