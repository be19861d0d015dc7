"""Memento captures an object's internal state so it can be restored later
without breaking encapsulation. The originator produces snapshots, the
caretaker stores them, and any snapshot can be rolled back to."""

from __future__ import annotations

from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class Memento:
    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value


class Originator:
    def __init__(self) -> None:
        self.state = ""

    def save(self) -> Memento:
        return Memento(self.state)

    def restore(self, memento: Memento) -> str:
        self.state = memento.value
        return self.state


class Caretaker:
    def __init__(self) -> None:
        self._values: List[Memento] = []

    def add_memento(self, memento: Memento) -> None:
        self._values.append(memento)

    def get_memento(self, index: int) -> Memento:
        return self._values[index]


@pattern(
    key="memento",
    name="Memento",
    category=PatternCategory.behavioral,
    expected_output=["Tesla", "Audi", "Tesla"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    originator = Originator()
    caretaker = Caretaker()

    originator.state = "Tesla"
    caretaker.add_memento(originator.save())
    originator.state = "Audi"
    caretaker.add_memento(originator.save())

    emit(originator.restore(caretaker.get_memento(0)))
    emit(originator.restore(caretaker.get_memento(1)))
    emit(originator.restore(caretaker.get_memento(0)))
