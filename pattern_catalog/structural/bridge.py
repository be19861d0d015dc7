"""Bridge splits an abstraction from its implementation so the two can vary
independently. Car models and paint colors are separate hierarchies; any
model can be combined with any color without a class per combination."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class Color(ABC):
    @abstractmethod
    def get(self) -> str: ...


class BlackColor(Color):
    def get(self) -> str:
        return "black"


class GrayColor(Color):
    def get(self) -> str:
        return "gray"


class Model(ABC):
    def __init__(self, color: Color) -> None:
        self.color = color

    @abstractmethod
    def paint(self) -> str: ...


class ModelS(Model):
    def paint(self) -> str:
        return f"Model S in {self.color.get()}"


class ModelX(Model):
    def paint(self) -> str:
        return f"Model X in {self.color.get()}"


@pattern(
    key="bridge",
    name="Bridge",
    category=PatternCategory.structural,
    expected_output=["Model S in black", "Model X in gray"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    emit(ModelS(BlackColor()).paint())
    emit(ModelX(GrayColor()).paint())
