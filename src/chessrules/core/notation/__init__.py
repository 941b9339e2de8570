"""Notation package: FEN and move text parsing and serialization."""

from chessrules.core.notation.algebraic import (
    annotated_move_text,
    move_to_text,
    parse_uci,
)
from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_text",
    "annotated_move_text",
    "parse_uci",
]
