"""Qt bridge to compute move hints in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessmoves.core.interfaces import IBoard
from chessmoves.core.move import Move
from chessmoves.core.move_generator import MoveGenerator
from chessmoves.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)


class MoveHintWorker(QObject):
    """Thread-affine worker that computes candidate moves on demand.

    Results are emitted as a list sorted by UCI text so views can render
    them in a stable order.
    """

    moves_ready = pyqtSignal(int, object)
    request_error = pyqtSignal(int, str)

    def __init__(self, *, include_promotions: bool = True) -> None:
        super().__init__()
        self._include_promotions = include_promotions

    @pyqtSlot(object, object, int)
    def request_moves(
        self, board_obj: object, source_obj: object, request_id: int
    ) -> None:
        """Generate moves for the piece on *source_obj* and emit them."""
        if not isinstance(board_obj, IBoard):
            self.request_error.emit(request_id, "Move hints received invalid board")
            return
        if not isinstance(source_obj, Coordinate):
            self.request_error.emit(request_id, "Move hints received invalid square")
            return

        try:
            moves = MoveGenerator(board_obj).piece_moves(source_obj)
        except ValueError as exc:
            _LOGGER.debug("Move hint request %d failed: %s", request_id, exc)
            self.request_error.emit(request_id, str(exc))
            return

        if not self._include_promotions:
            # Views that ask for the piece type later only need one move per square.
            moves = {Move(m.start, m.end) for m in moves}

        self.moves_ready.emit(request_id, sorted(moves, key=str))

    @pyqtSlot(bool)
    def set_include_promotions(self, include: bool) -> None:
        """Toggle promotion expansion (takes effect on the next request)."""
        self._include_promotions = include
