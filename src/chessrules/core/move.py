"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PROMOTION_TYPES, MoveAction, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    The moving piece and both squares are held by value, so a move stays
    meaningful after the position it came from has changed. Whether it still
    applies is checked by :meth:`Position.apply_move`.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    action: MoveAction = MoveAction.MOVE
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.from_sq == self.to_sq:
            raise ValueError(f"Move must change square: {self.from_sq}")
        if self.action.is_promotion:
            if self.promotion not in PROMOTION_TYPES:
                raise ValueError(f"Invalid promotion piece: {self.promotion!r}")
        elif self.promotion is not None:
            raise ValueError(f"Promotion given for {self.action.name} move")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @property
    def is_capture(self) -> bool:
        return self.action.is_capture
