"""Behavioral patterns: variations on how objects collaborate."""

from . import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)

__all__ = [
    "chain_of_responsibility",
    "command",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "state",
    "strategy",
    "template_method",
    "visitor",
]
