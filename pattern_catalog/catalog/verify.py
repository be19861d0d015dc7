"""Documentation fidelity checks.

A demo passes when the lines it emits are exactly the lines documented for
it. Any exception raised by a demo is recorded on its result so that one
broken demo never hides the state of the others.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .models import DemoResult, VerificationReport
from .registry import PatternRegistry

_LOGGER = logging.getLogger(__name__)


def verify(registry: PatternRegistry, keys: Optional[Iterable[str]] = None) -> VerificationReport:
    """Run the selected demos (all by default) and compare their output."""

    entries = registry.list() if keys is None else [registry.get(k) for k in keys]
    results: List[DemoResult] = []
    for entry in entries:
        try:
            result = registry.run(entry.key)
        except Exception as exc:  # noqa: BLE001 - reported, not raised
            _LOGGER.warning("Demo %s raised %s: %s", entry.key, type(exc).__name__, exc)
            result = DemoResult(
                key=entry.key,
                expected=list(entry.expected_output),
                error=f"{type(exc).__name__}: {exc}",
            )
        if not result.matches and result.error is None:
            _LOGGER.info("Demo %s output differs from its documented output", entry.key)
        results.append(result)

    report = VerificationReport(results=results)
    _LOGGER.debug("Verified %d demo(s): %d passed", len(results), len(report.passed))
    return report


def describe_mismatch(result: DemoResult) -> List[str]:
    """Human-readable lines explaining why ``result`` failed."""

    if result.error is not None:
        return [f"{result.key}: raised {result.error}"]
    lines = [f"{result.key}: output differs"]
    width = max(len(result.lines), len(result.expected))
    for index in range(width):
        actual = result.lines[index] if index < len(result.lines) else "<missing>"
        expected = result.expected[index] if index < len(result.expected) else "<missing>"
        if actual != expected:
            lines.append(f"  line {index + 1}: expected {expected!r}, got {actual!r}")
    return lines
