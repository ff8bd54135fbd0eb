"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from simplesvg.utils import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging() -> Iterator[None]:
    """Drop log handlers installed by renderer and CLI runs after each test."""
    yield
    reset_logging()
