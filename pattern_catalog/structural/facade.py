"""Facade offers one simple entry point to a complicated subsystem. The
conveyor exposes many individual assembly steps; the facade runs them in the
right order behind a single ``assemble_car()`` call."""

from __future__ import annotations

from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class Conveyor:
    def set_body(self) -> str:
        return "Setting up the body"

    def get_body(self) -> str:
        return "Removing the body"

    def set_engine(self) -> str:
        return "Installing the engine"

    def get_engine(self) -> str:
        return "Removing the engine"

    def set_interior(self) -> str:
        return "Setting up the interior"

    def get_interior(self) -> str:
        return "Removing the interior"

    def set_exterior(self) -> str:
        return "Setting up the exterior"

    def get_exterior(self) -> str:
        return "Removing the exterior"

    def set_wheels(self) -> str:
        return "Installing the wheels"

    def get_wheels(self) -> str:
        return "Removing the wheels"

    def add_electronics(self) -> str:
        return "Adding electronics"

    def paint(self) -> str:
        return "Painting"


class ConveyorFacade:
    def __init__(self, conveyor: Conveyor) -> None:
        self.conveyor = conveyor

    def assemble_car(self) -> List[str]:
        return [
            self.conveyor.set_body(),
            self.conveyor.set_engine(),
            self.conveyor.set_interior(),
            self.conveyor.set_exterior(),
            self.conveyor.set_wheels(),
            self.conveyor.add_electronics(),
            self.conveyor.paint(),
        ]


@pattern(
    key="facade",
    name="Facade",
    category=PatternCategory.structural,
    expected_output=[
        "Setting up the body",
        "Installing the engine",
        "Setting up the interior",
        "Setting up the exterior",
        "Installing the wheels",
        "Adding electronics",
        "Painting",
    ],
)
def demo(emit: Callable[[str], None] = print) -> None:
    for step in ConveyorFacade(Conveyor()).assemble_car():
        emit(step)
