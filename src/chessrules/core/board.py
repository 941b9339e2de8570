"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, Occupancy, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable square → piece placement; at most one piece per square."""

    __slots__ = ("_placement",)

    def __init__(self, placement: dict[Square, Piece] | None = None) -> None:
        self._placement: dict[Square, Piece] = dict(placement or {})

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._placement.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is None:
            self._placement.pop(sq, None)
        else:
            self._placement[sq] = piece

    def pop(self, sq: Square) -> Piece | None:
        """Remove and return the piece on *sq*, if any."""
        return self._placement.pop(sq, None)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._placement

    def occupancy(self, sq: Square, color: Color) -> Occupancy:
        """Classify *sq* from *color*'s point of view."""
        piece = self._placement.get(sq)
        if piece is None:
            return Occupancy.EMPTY
        if piece.color == color:
            return Occupancy.SAME_COLOR
        return Occupancy.OPPOSITE_COLOR

    # -- Query helpers ------------------------------------------------------

    def items(self) -> list[tuple[Square, Piece]]:
        """Snapshot of every (square, piece) pair."""
        return list(self._placement.items())

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self._placement.items()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self._placement.items() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it has no king."""
        for sq, piece in self._placement.items():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    def __len__(self) -> int:
        return len(self._placement)

    def __iter__(self) -> Iterator[Square]:
        return iter(list(self._placement))

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        return Board(self._placement)

    def clear(self) -> None:
        self._placement.clear()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(1, 9):
            b[Square(f, 2)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 7)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK, start=1):
            b[Square(f, 1)] = Piece(Color.WHITE, pt)
            b[Square(f, 8)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._placement == other._placement

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in range(1, 9):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
