"""Singleton guarantees a class has only one instance and gives a global
point of access to it. Constructing the database a second time hands back
the first instance untouched."""

from __future__ import annotations

from typing import Callable, Optional

from pattern_catalog.catalog import PatternCategory, pattern


class Database:
    _instance: Optional["Database"] = None

    def __new__(cls, data: str) -> "Database":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.data = data
            cls._instance = instance
        return cls._instance

    def get_data(self) -> str:
        return self.data

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


@pattern(
    key="singleton",
    name="Singleton",
    category=PatternCategory.creational,
    expected_output=["mongo", "mongo", "same instance: True"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    Database.reset()
    mongo = Database("mongo")
    mysql = Database("mysql")
    emit(mongo.get_data())
    emit(mysql.get_data())
    emit(f"same instance: {mongo is mysql}")
