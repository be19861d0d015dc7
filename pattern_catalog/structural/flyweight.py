"""Flyweight shares objects that are requested repeatedly instead of creating
a new one each time. The factory keeps one car per model and returns the
cached instance on every later request."""

from __future__ import annotations

from typing import Callable, Dict, List

from pattern_catalog.catalog import PatternCategory, pattern


class Auto:
    def __init__(self, model: str, price: int) -> None:
        self.model = model
        self.price = price

    def __str__(self) -> str:
        return f"{self.model} {self.price}"


class AutoFactory:
    def __init__(self) -> None:
        self._models: Dict[str, Auto] = {}

    def create(self, model: str, price: int) -> Auto:
        if model not in self._models:
            self._models[model] = Auto(model, price)
        return self._models[model]

    def get_models(self) -> List[str]:
        return list(self._models)

    def __len__(self) -> int:
        return len(self._models)


@pattern(
    key="flyweight",
    name="Flyweight",
    category=PatternCategory.structural,
    expected_output=["Model S 80000", "Model X 95000", "Model S 80000", "cars created: 2"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    factory = AutoFactory()
    emit(str(factory.create("Model S", 80000)))
    emit(str(factory.create("Model X", 95000)))
    emit(str(factory.create("Model S", 80000)))
    emit(f"cars created: {len(factory)}")
