"""State lets an object change its behavior when its internal state changes,
as if it changed class. Each traffic light state knows which state follows
it, so the light cycles red, yellow, green and back to red."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class Light(ABC):
    color = ""

    def sign(self) -> str:
        return self.color

    @abstractmethod
    def next(self) -> "Light": ...


class RedLight(Light):
    color = "red"

    def next(self) -> Light:
        return YellowLight()


class YellowLight(Light):
    color = "yellow"

    def next(self) -> Light:
        return GreenLight()


class GreenLight(Light):
    color = "green"

    def next(self) -> Light:
        return RedLight()


class TrafficLight:
    def __init__(self) -> None:
        self.current: Light = RedLight()

    def change(self) -> None:
        self.current = self.current.next()

    def sign(self) -> str:
        return self.current.sign()


@pattern(
    key="state",
    name="State",
    category=PatternCategory.behavioral,
    expected_output=["red", "yellow", "green", "red"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    light = TrafficLight()
    emit(light.sign())
    for _ in range(3):
        light.change()
        emit(light.sign())
