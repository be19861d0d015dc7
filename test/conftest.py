from __future__ import annotations

import logging
from typing import Callable, List

import pytest

from pattern_catalog.catalog import PatternRegistry, get_registry
from pattern_catalog.core.config import reset_settings


@pytest.fixture(scope="session")
def registry() -> PatternRegistry:
    """Default registry with every bundled demo registered."""
    return get_registry()


@pytest.fixture
def lines() -> List[str]:
    """Collector passed to demos as their ``emit`` callable."""
    return []


@pytest.fixture
def emit(lines: List[str]) -> Callable[[str], None]:
    return lines.append


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; re-read the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put the originals back."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
