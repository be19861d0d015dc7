"""
Command line interface.

Usage:
    pattern-catalog list --category structural
    pattern-catalog run strategy
    pattern-catalog verify
    pattern-catalog readme --output README.md
"""

from typing import Optional, Tuple

import click
from pydantic import ValidationError

from pattern_catalog.catalog import (
    PatternCategory,
    PatternRegistry,
    describe_mismatch,
    get_registry,
    verify as verify_demos,
    write_readme,
    render_readme,
)
from pattern_catalog.core.config import get_settings
from pattern_catalog.core.logging_config import get_logger, setup_logging
from pattern_catalog.errors import PatternNotFoundError

logger = get_logger(__name__)

_CATEGORIES = [c.value for c in PatternCategory]


def _registry(ctx: click.Context) -> PatternRegistry:
    return ctx.obj["registry"]


def _entry(ctx: click.Context, key: str):
    try:
        return _registry(ctx).get(key)
    except PatternNotFoundError as exc:
        raise click.BadParameter(str(exc), param_hint="KEY") from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override PATTERN_CATALOG_LOG_LEVEL",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Browse, run and verify the design pattern catalogue."""
    try:
        setup_logging(log_level=log_level)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.ensure_object(dict)
    ctx.obj.setdefault("registry", get_registry())


@main.command("list")
@click.option("--category", type=click.Choice(_CATEGORIES), default=None, help="Only show one group")
@click.pass_context
def list_patterns(ctx: click.Context, category: Optional[str]) -> None:
    """List catalogue entries."""
    entries = _registry(ctx).list(PatternCategory(category) if category else None)
    width = max((len(e.key) for e in entries), default=0)
    for entry in entries:
        click.echo(f"{entry.key.ljust(width)}  {entry.name}  ({entry.category.value})")


@main.command()
@click.argument("key")
@click.pass_context
def show(ctx: click.Context, key: str) -> None:
    """Show a pattern's definition and documented output."""
    entry = _entry(ctx, key)
    click.echo(f"{entry.name} ({entry.category.value})")
    click.echo("")
    click.echo(entry.description)
    click.echo("")
    click.echo("Expected output:")
    for line in entry.expected_output:
        click.echo(f"  {line}")


@main.command()
@click.argument("key")
@click.pass_context
def run(ctx: click.Context, key: str) -> None:
    """Run a pattern's demo."""
    entry = _entry(ctx, key)
    logger.info("Running %s", entry.key)
    entry.demo(click.echo)


@main.command()
@click.argument("keys", nargs=-1)
@click.pass_context
def verify(ctx: click.Context, keys: Tuple[str, ...]) -> None:
    """Check demos print exactly their documented output."""
    registry = _registry(ctx)
    for key in keys:
        _entry(ctx, key)
    report = verify_demos(registry, keys or None)

    for result in report.failed:
        for line in describe_mismatch(result):
            click.echo(line, err=True)
    click.echo(f"{len(report.passed)} passed, {len(report.failed)} failed")
    if not report.ok:
        ctx.exit(1)


@main.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True), default=None)
@click.option("--title", default=None, help="Override PATTERN_CATALOG_README_TITLE")
@click.pass_context
def readme(ctx: click.Context, output: Optional[str], title: Optional[str]) -> None:
    """Render the README, to stdout or to a file."""
    title = title or get_settings().readme_title
    if output is None:
        click.echo(render_readme(_registry(ctx), title=title), nl=False)
        return
    try:
        path = write_readme(output, _registry(ctx), title=title)
    except OSError as exc:
        raise click.FileError(output, hint=str(exc)) from exc
    click.echo(f"README written to {path}")


if __name__ == "__main__":
    main()
