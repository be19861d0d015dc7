"""Visitor separates an operation from the objects it works on. Each car
accepts a visitor and calls back the visitor method meant for its own type,
so new operations can be added without touching the car classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class Auto(ABC):
    @abstractmethod
    def info(self) -> str: ...

    @abstractmethod
    def accept(self, visitor: "AutoVisitor") -> str: ...


class Tesla(Auto):
    def info(self) -> str:
        return "Tesla"

    def accept(self, visitor: "AutoVisitor") -> str:
        return visitor.visit_tesla(self)


class Bmw(Auto):
    def info(self) -> str:
        return "BMW"

    def accept(self, visitor: "AutoVisitor") -> str:
        return visitor.visit_bmw(self)


class Audi(Auto):
    def info(self) -> str:
        return "Audi"

    def accept(self, visitor: "AutoVisitor") -> str:
        return visitor.visit_audi(self)


class AutoVisitor(ABC):
    @abstractmethod
    def visit_tesla(self, auto: Tesla) -> str: ...

    @abstractmethod
    def visit_bmw(self, auto: Bmw) -> str: ...

    @abstractmethod
    def visit_audi(self, auto: Audi) -> str: ...


class ExportVisitor(AutoVisitor):
    def export(self, auto: Auto) -> str:
        return f"Exported data: {auto.info()}"

    def visit_tesla(self, auto: Tesla) -> str:
        return self.export(auto)

    def visit_bmw(self, auto: Bmw) -> str:
        return self.export(auto)

    def visit_audi(self, auto: Audi) -> str:
        return self.export(auto)


@pattern(
    key="visitor",
    name="Visitor",
    category=PatternCategory.behavioral,
    expected_output=["Exported data: Tesla", "Exported data: BMW", "Exported data: Audi"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    visitor = ExportVisitor()
    for auto in (Tesla(), Bmw(), Audi()):
        emit(auto.accept(visitor))
