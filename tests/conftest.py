"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator, Mapping

import pytest

from chessmoves.core.board import Board
from chessmoves.core.piece import Piece
from chessmoves.core.types import Coordinate

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


BoardFactory = Callable[[Mapping[str, str]], Board]


def build_board(placement: Mapping[str, str]) -> Board:
    """Board from ``{"e4": "P", "d5": "p"}`` (uppercase = white)."""
    board = Board()
    for name, char in placement.items():
        board[Coordinate.parse(name)] = Piece.from_char(char)
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    return build_board


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt bridge tests."""
    qt_core = pytest.importorskip("PyQt6.QtCore")

    app = qt_core.QCoreApplication.instance()
    if app is None:
        app = qt_core.QCoreApplication([])
    yield app
