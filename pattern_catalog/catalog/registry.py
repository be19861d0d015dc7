"""Pattern registry.

Every demonstration module registers its ``demo`` function here through the
:func:`pattern` decorator. The registry keeps entries grouped by category in
registration order, which is also the order the README lists them in.

Lookups are forgiving about spelling: ``"Factory Method"``,
``"factory_method"`` and ``"factory-method"`` all resolve to the same entry.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import re
import sys
from typing import Dict, Iterator, List, Optional, Sequence

from pattern_catalog.errors import DuplicatePatternError, PatternNotFoundError

from .models import CATEGORY_ORDER, DemoFn, DemoResult, PatternCategory, PatternEntry

_LOGGER = logging.getLogger(__name__)

_CATEGORY_PACKAGES = (
    "pattern_catalog.creational",
    "pattern_catalog.structural",
    "pattern_catalog.behavioral",
)


def normalize_key(key: str) -> str:
    """Return the canonical kebab-case form of ``key``."""

    return re.sub(r"[\s_\-]+", "-", key.strip().lower())


class PatternRegistry:
    """In-memory collection of :class:`PatternEntry` objects."""

    def __init__(self) -> None:
        self._entries: Dict[str, PatternEntry] = {}

    def register(self, entry: PatternEntry) -> PatternEntry:
        if entry.key in self._entries:
            raise DuplicatePatternError(entry.key)
        self._entries[entry.key] = entry
        _LOGGER.debug("Registered pattern %s (%s)", entry.key, entry.category.value)
        return entry

    def get(self, key: str) -> PatternEntry:
        try:
            return self._entries[normalize_key(key)]
        except KeyError:
            raise PatternNotFoundError(key) from None

    def list(self, category: Optional[PatternCategory] = None) -> List[PatternEntry]:
        """Return entries in category order, then registration order."""

        wanted = CATEGORY_ORDER if category is None else [PatternCategory(category)]
        return [e for c in wanted for e in self._entries.values() if e.category == c]

    def categories(self) -> Dict[PatternCategory, List[PatternEntry]]:
        return {c: self.list(c) for c in CATEGORY_ORDER}

    def run(self, key: str) -> DemoResult:
        """Run a demo and collect everything it emits."""

        entry = self.get(key)
        lines: List[str] = []
        _LOGGER.debug("Running demo %s from %s", entry.key, entry.module)
        entry.demo(lines.append)
        _LOGGER.debug("Demo %s emitted %d line(s)", entry.key, len(lines))
        return DemoResult(key=entry.key, lines=lines, expected=list(entry.expected_output))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self.list())


_DEFAULT_REGISTRY = PatternRegistry()


def pattern(
    *,
    key: str,
    name: str,
    category: PatternCategory,
    expected_output: Sequence[str],
    description: Optional[str] = None,
    registry: Optional[PatternRegistry] = None,
):
    """Register the decorated ``demo`` function as a catalogue entry.

    When ``description`` is omitted the defining module's docstring is used,
    so each pattern's prose lives next to its code.
    """

    def decorator(fn: DemoFn) -> DemoFn:
        text = description
        if text is None:
            module = sys.modules.get(fn.__module__)
            text = inspect.cleandoc(getattr(module, "__doc__", None) or "")
        entry = PatternEntry(
            key=key,
            name=name,
            category=category,
            description=text,
            module=fn.__module__,
            expected_output=list(expected_output),
            demo=fn,
        )
        (registry if registry is not None else _DEFAULT_REGISTRY).register(entry)
        return fn

    return decorator


def get_registry() -> PatternRegistry:
    """Return the default registry with every bundled demo registered."""

    for package in _CATEGORY_PACKAGES:
        importlib.import_module(package)
    return _DEFAULT_REGISTRY
