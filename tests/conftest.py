"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.position import Position


@pytest.fixture
def empty_position() -> Position:
    """Empty board, white to move, no castling rights."""
    return Position.empty()


@pytest.fixture
def start_position() -> Position:
    return Position.starting()
