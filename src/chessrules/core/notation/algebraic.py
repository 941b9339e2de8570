"""Long algebraic move text and UCI move parsing."""

from __future__ import annotations

from chessrules.core.enums import MoveAction, MoveStatus
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import NOTATION_LETTERS
from chessrules.core.position import Position
from chessrules.core.rules import Rules

_STATUS_SUFFIX: dict[MoveStatus, str] = {
    MoveStatus.NONE: "",
    MoveStatus.CHECK: "+",
    MoveStatus.CHECKMATE: "#",
}

_UCI_PROMOTION_CHARS = "nbrq"


def move_to_text(move: Move, status: MoveStatus = MoveStatus.NONE) -> str:
    """Long algebraic text, e.g. ``Ng1f3``, ``e5xd6 e.p.``, ``e7e8=Q+``."""
    if move.action == MoveAction.SHORT_CASTLE:
        text = "0-0"
    elif move.action == MoveAction.LONG_CASTLE:
        text = "0-0-0"
    else:
        text = move.piece.notation_letter + str(move.from_sq)
        if move.is_capture:
            text += "x"
        text += str(move.to_sq)
        if move.promotion is not None:
            text += "=" + NOTATION_LETTERS[move.promotion]
        elif move.action == MoveAction.EN_PASSANT:
            text += " e.p."
    return text + _STATUS_SUFFIX[status]


def annotated_move_text(position: Position, move: Move) -> str:
    """:func:`move_to_text` with the check/checkmate suffix for *position*."""
    return move_to_text(move, Rules.move_status(position, move))


def parse_uci(position: Position, uci: str) -> Move:
    """Find the legal move in *position* written as UCI text, e.g. ``e7e8q``."""
    text = uci.strip().lower()
    if len(text) not in (4, 5):
        raise ValueError(f"Invalid UCI move: {uci!r}")

    if len(text) == 5 and text[4] not in _UCI_PROMOTION_CHARS:
        raise ValueError(f"Invalid UCI promotion: {uci!r}")

    for move in MoveGenerator(position).generate_legal_moves():
        if move.uci == text:
            return move
    raise ValueError(f"Illegal move: {uci}")
