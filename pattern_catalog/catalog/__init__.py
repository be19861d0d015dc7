"""Catalogue facade.

This subpackage defines the public surface of the pattern catalogue. It
re-exports the key types that callers are expected to use:

- ``PatternRegistry`` / ``get_registry``: the registry and its default,
  fully populated instance.
- ``pattern``: decorator demo modules use to register themselves.
- ``verify``: documentation fidelity checks.
- ``render_readme`` / ``write_readme``: README generation.
"""

from .models import (
    DemoResult,
    PatternCategory,
    PatternEntry,
    VerificationReport,
)
from .readme import render_readme, write_readme
from .registry import PatternRegistry, get_registry, normalize_key, pattern
from .verify import describe_mismatch, verify

__all__ = [
    "DemoResult",
    "PatternCategory",
    "PatternEntry",
    "PatternRegistry",
    "VerificationReport",
    "describe_mismatch",
    "get_registry",
    "normalize_key",
    "pattern",
    "render_readme",
    "verify",
    "write_readme",
]
