"""Template Method fixes the skeleton of an algorithm in a base class and
lets subclasses override individual steps. Every builder assembles a car in
the same order; only the steps that differ are redefined."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class Builder(ABC):
    def build(self) -> List[str]:
        return [
            self.add_engine(),
            self.install_chassis(),
            self.add_electronic(),
            self.collect_accessories(),
        ]

    @abstractmethod
    def add_engine(self) -> str: ...

    @abstractmethod
    def install_chassis(self) -> str: ...

    def add_electronic(self) -> str:
        return "Adding electronic"

    def collect_accessories(self) -> str:
        return "Collecting accessories"


class TeslaBuilder(Builder):
    def add_engine(self) -> str:
        return "Adding electric engine"

    def install_chassis(self) -> str:
        return "Installing Tesla chassis"

    def add_electronic(self) -> str:
        return "Adding special electronic"


class BmwBuilder(Builder):
    def add_engine(self) -> str:
        return "Adding petrol engine"

    def install_chassis(self) -> str:
        return "Installing BMW chassis"


@pattern(
    key="template-method",
    name="Template Method",
    category=PatternCategory.behavioral,
    expected_output=[
        "Adding electric engine",
        "Installing Tesla chassis",
        "Adding special electronic",
        "Collecting accessories",
        "Adding petrol engine",
        "Installing BMW chassis",
        "Adding electronic",
        "Collecting accessories",
    ],
)
def demo(emit: Callable[[str], None] = print) -> None:
    for builder in (TeslaBuilder(), BmwBuilder()):
        for step in builder.build():
            emit(step)
