"""Pytest configuration and fixtures."""

from typing import Callable

import pytest

from editcore.core.buffer import Buffer
from editcore.core.filetype import FileType, HighlightingOptions


@pytest.fixture
def rust_options() -> HighlightingOptions:
    """Highlighting options with every category enabled."""
    return FileType.RUST.options


@pytest.fixture
def plain_options() -> HighlightingOptions:
    """Highlighting options with every category disabled."""
    return FileType.PLAIN.options


@pytest.fixture
def make_buffer() -> Callable[..., Buffer]:
    """Factory building an in-memory buffer from line texts."""

    def factory(*lines: str, filename: str = "main.rs") -> Buffer:
        return Buffer(list(lines), filename)

    return factory
