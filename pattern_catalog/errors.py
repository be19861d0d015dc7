"""Error types for the pattern catalogue.

Defines a small hierarchy of exceptions raised by the registry and by demos
whose factories are asked for something they cannot build.
"""

from __future__ import annotations


class PatternCatalogError(Exception):
    """Base error for all pattern catalogue exceptions."""


class PatternNotFoundError(PatternCatalogError, KeyError):
    """Raised when no registered pattern matches the requested key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Pattern not found: '{key}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicatePatternError(PatternCatalogError):
    """Raised when a pattern key is registered more than once."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Pattern already registered: '{key}'")


class UnknownProductError(PatternCatalogError, ValueError):
    """Raised when a factory is asked for a product it does not make."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown product type: '{kind}'")
