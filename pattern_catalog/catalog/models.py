"""Data models and enums for the pattern catalogue.

These models describe what a catalogue entry is (its identity, prose and
documented output) and what running or verifying a demo produces. Demo
objects themselves are plain classes inside each pattern module and never
appear here.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

Emit = Callable[[str], None]
DemoFn = Callable[[Emit], None]


class PatternCategory(str, Enum):
    """The three classical pattern groups, in document order."""

    creational = "creational"
    structural = "structural"
    behavioral = "behavioral"


CATEGORY_ORDER: List[PatternCategory] = [
    PatternCategory.creational,
    PatternCategory.structural,
    PatternCategory.behavioral,
]


class BaseSchema(BaseModel):
    """Base schema for catalogue models."""

    model_config = ConfigDict(frozen=True)


class PatternEntry(BaseSchema):
    """
    A single catalogue entry.

    Attributes:
        key: Kebab-case identifier, unique within a registry (e.g. 'factory-method').
        name: Display name (e.g. 'Factory Method').
        category: Which pattern group the entry belongs to.
        description: One-paragraph definition of the pattern.
        module: Dotted path of the module holding the demonstration code.
        expected_output: Lines the demo prints, in order.
        demo: Callable that runs the demonstration, writing lines through ``emit``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")
    name: str = Field(min_length=1)
    category: PatternCategory
    description: str = Field(min_length=1)
    module: str
    expected_output: List[str] = Field(min_length=1)
    demo: DemoFn = Field(exclude=True, repr=False)


class DemoResult(BaseSchema):
    """Outcome of running one demo."""

    key: str
    lines: List[str] = Field(default_factory=list)
    expected: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def matches(self) -> bool:
        return self.error is None and self.lines == self.expected


class VerificationReport(BaseSchema):
    """Results of checking demos against their documented output."""

    results: List[DemoResult] = Field(default_factory=list)

    @property
    def passed(self) -> List[DemoResult]:
        return [r for r in self.results if r.matches]

    @property
    def failed(self) -> List[DemoResult]:
        return [r for r in self.results if not r.matches]

    @property
    def ok(self) -> bool:
        return not self.failed
