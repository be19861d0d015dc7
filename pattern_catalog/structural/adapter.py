"""Adapter lets classes with incompatible interfaces work together. The car
only knows how to start an engine through ``simple_interface``; the adapter
wraps the V8 engine's complicated interface so it fits."""

from __future__ import annotations

from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class Engine2:
    def simple_interface(self) -> str:
        return "Engine 2.0 - tr-tr-tr"


class EngineV8:
    def complicated_interface(self) -> str:
        return "Engine V8! - wroom wroom!"


class EngineV8Adapter:
    def __init__(self, engine: EngineV8) -> None:
        self._engine = engine

    def simple_interface(self) -> str:
        return self._engine.complicated_interface()


class Auto:
    def start_engine(self, engine) -> str:
        return engine.simple_interface()


@pattern(
    key="adapter",
    name="Adapter",
    category=PatternCategory.structural,
    expected_output=["Engine 2.0 - tr-tr-tr", "Engine V8! - wroom wroom!"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    auto = Auto()
    emit(auto.start_engine(Engine2()))
    emit(auto.start_engine(EngineV8Adapter(EngineV8())))
