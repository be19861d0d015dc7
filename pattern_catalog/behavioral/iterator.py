"""Iterator gives sequential access to the elements of a collection without
exposing how the collection is stored. The car iterator supports an explicit
``has_next``/``next`` walk and plain ``for`` loops alike."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List

from pattern_catalog.catalog import PatternCategory, pattern


class CarIterator:
    def __init__(self, cars: Iterable[str]) -> None:
        self._cars: List[str] = list(cars)
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._cars)

    def next(self) -> str:
        if not self.has_next():
            raise StopIteration
        car = self._cars[self._index]
        self._index += 1
        return car

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()


@pattern(
    key="iterator",
    name="Iterator",
    category=PatternCategory.behavioral,
    expected_output=["Tesla", "BMW", "Audi"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    cars = CarIterator(["Tesla", "BMW", "Audi"])
    while cars.has_next():
        emit(cars.next())
