"""High-level chess rules: check, checkmate, stalemate, move status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, MoveStatus
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Draws by repetition, the fifty-move rule or insufficient material are not
    detected; the position only carries the raw clocks.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return position.is_in_check()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return len(gen.generate_legal_moves()) == 0

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return len(gen.generate_legal_moves()) == 0

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        gen = MoveGenerator(position)
        if gen.generate_legal_moves():
            return GameResult.IN_PROGRESS

        if gen.is_in_check(position.side_to_move):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate

    @staticmethod
    def move_status(position: Position, move: Move) -> MoveStatus:
        """Whether *move* gives check or checkmate to the opponent."""
        after = position.apply_move(move)
        if not Rules.is_in_check(after):
            return MoveStatus.NONE
        if MoveGenerator(after).generate_legal_moves():
            return MoveStatus.CHECK
        return MoveStatus.CHECKMATE
