"""README rendering.

The README is generated from the registry so the prose, the code and the
commented expected output shown for each pattern always come from the same
place. Each snippet is the demo module's source with catalogue plumbing
removed: the module docstring (shown as prose instead), imports from the
``pattern_catalog.catalog`` package and the ``@pattern(...)`` decorator.
"""

from __future__ import annotations

import ast
import importlib
import inspect
import logging
from pathlib import Path
from typing import List, Optional, Set, Union

from .models import PatternEntry
from .registry import PatternRegistry, normalize_key

_LOGGER = logging.getLogger(__name__)

_CATALOG_PACKAGE = "pattern_catalog.catalog"


def _plumbing_lines(tree: ast.Module) -> Set[int]:
    """Line numbers (1-based) of docstring, catalogue imports and decorators."""

    lines: Set[int] = set()

    def span(node: ast.AST) -> range:
        return range(node.lineno, (node.end_lineno or node.lineno) + 1)

    body = tree.body
    if body and isinstance(body[0], ast.Expr) and isinstance(getattr(body[0], "value", None), ast.Constant):
        if isinstance(body[0].value.value, str):
            lines.update(span(body[0]))

    for node in body:
        if isinstance(node, ast.ImportFrom) and (node.module or "").startswith(_CATALOG_PACKAGE):
            lines.update(span(node))
        elif isinstance(node, ast.FunctionDef):
            for decorator in node.decorator_list:
                target = decorator.func if isinstance(decorator, ast.Call) else decorator
                if isinstance(target, ast.Name) and target.id == "pattern":
                    lines.update(span(decorator))
    return lines


def extract_snippet(source: str) -> str:
    """Strip catalogue plumbing from a demo module's source."""

    skip = _plumbing_lines(ast.parse(source))
    kept: List[str] = []
    for number, line in enumerate(source.splitlines(), start=1):
        if number in skip:
            continue
        # collapse runs of blank lines left behind by removed blocks
        if not line.strip() and kept and not kept[-1].strip() and len(kept) > 1 and not kept[-2].strip():
            continue
        kept.append(line)
    return "\n".join(kept).strip("\n")


def render_entry(entry: PatternEntry) -> str:
    module = importlib.import_module(entry.module)
    snippet = extract_snippet(inspect.getsource(module))
    output = "\n".join(f"# {line}" for line in entry.expected_output)
    return "\n".join(
        [
            f"### {entry.name}",
            "",
            entry.description,
            "",
            "```python",
            snippet,
            "",
            "demo()",
            output,
            "```",
        ]
    )


def render_readme(registry: PatternRegistry, title: Optional[str] = None) -> str:
    """Render the whole catalogue as Markdown."""

    if title is None:
        from pattern_catalog.core.config import get_settings

        title = get_settings().readme_title

    parts: List[str] = [f"# {title}", ""]
    grouped = registry.categories()

    for category, entries in grouped.items():
        if not entries:
            continue
        parts.append(f"- [{category.value.capitalize()}](#{category.value})")
        for entry in entries:
            parts.append(f"  - [{entry.name}](#{normalize_key(entry.name)})")
    parts.append("")

    for category, entries in grouped.items():
        if not entries:
            continue
        parts.extend([f"## {category.value.capitalize()}", ""])
        for entry in entries:
            parts.extend([render_entry(entry), ""])

    _LOGGER.debug("Rendered README with %d pattern(s)", len(registry))
    return "\n".join(parts).rstrip("\n") + "\n"


def write_readme(path: Union[str, Path], registry: PatternRegistry, title: Optional[str] = None) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_readme(registry, title=title), encoding="utf-8")
    _LOGGER.info("README written to %s", target)
    return target
