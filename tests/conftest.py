"""Pytest fixtures for time rule tests."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Generator

import pytest
import pytz

# 2026-10-18 is a Sunday, so day offsets line up with weekday indices
SUNDAY = (2026, 10, 18)


@pytest.fixture
def utc_at() -> Callable[..., datetime]:
    """Build an aware UTC instant in the week starting Sunday 2026-10-18."""

    def _build(day: int = 1, hour: int = 12, minute: int = 0, second: int = 0) -> datetime:
        year, month, first = SUNDAY
        return pytz.utc.localize(datetime(year, month, first + day, hour, minute, second))

    return _build


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Drop handlers added by setup_logging during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
