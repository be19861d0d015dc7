"""Proxy stands in front of another object and controls access to it. The
security system answers the same calls as the car door but only opens it
for the right password."""

from __future__ import annotations

from typing import Callable

from pattern_catalog.catalog import PatternCategory, pattern


class CarAccess:
    def open(self) -> str:
        return "Opening car door"

    def close(self) -> str:
        return "Closing the car door"


class SecuritySystem:
    def __init__(self, door: CarAccess) -> None:
        self.door = door

    def open(self, password: str) -> str:
        if self.authenticate(password):
            return self.door.open()
        return "Access denied!"

    def authenticate(self, password: str) -> bool:
        return password == "Ilon"

    def close(self) -> str:
        return self.door.close()


@pattern(
    key="proxy",
    name="Proxy",
    category=PatternCategory.structural,
    expected_output=["Access denied!", "Opening car door", "Closing the car door"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    door = SecuritySystem(CarAccess())
    emit(door.open("Jack"))
    emit(door.open("Ilon"))
    emit(door.close())
