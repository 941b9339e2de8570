"""Exceptions raised while decoding FEN records and applying moves.

Both families derive from ``ValueError``: each signals bad input rather than
a broken invariant inside the library.
"""

from __future__ import annotations

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square

# ── FEN decoding ─────────────────────────────────────────────────────────────


class FenParseError(ValueError):
    """A FEN record could not be decoded."""


class _FenCharError(FenParseError):
    _what = ""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid FEN {self._what}: {char!r}")


class InvalidPieceError(_FenCharError):
    _what = "piece"


class InvalidColorError(_FenCharError):
    _what = "side-to-move"


class InvalidCastlingError(_FenCharError):
    _what = "castling availability"


class InvalidFileError(_FenCharError):
    _what = "en-passant file"


class InvalidRankError(_FenCharError):
    _what = "en-passant rank"


class InvalidNumberError(FenParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid FEN number: {text!r}")


class UnexpectedEndError(FenParseError):
    def __init__(self) -> None:
        super().__init__("FEN record was too short")


class IncompletePiecePlacementError(FenParseError):
    def __init__(self) -> None:
        super().__init__("Not all squares were provided in FEN piece placement")


# ── Move application ─────────────────────────────────────────────────────────


class MoveError(ValueError):
    """A move does not fit the position it is applied to."""


class PieceMissingError(MoveError):
    def __init__(self, square: Square) -> None:
        self.square = square
        super().__init__(f"No piece on {square}")


class PieceMismatchError(MoveError):
    def __init__(self, square: Square) -> None:
        self.square = square
        super().__init__(f"Piece on {square} differs from the moving piece")


class OutOfTurnError(MoveError):
    def __init__(self, color: Color) -> None:
        self.color = color
        super().__init__(f"It is not {color}'s turn")


class _KindError(MoveError):
    _what = ""

    def __init__(self, piece_type: PieceType) -> None:
        self.piece_type = piece_type
        super().__init__(f"{self._what}, got {piece_type.name}")


class InvalidPromotionPawnError(_KindError):
    _what = "Only a pawn can promote"


class InvalidCastlingKingError(_KindError):
    _what = "Castling needs the king moving from its home square to its castling square"


class InvalidCastlingRookError(_KindError):
    _what = "Castling needs a rook on its home square"


class InvalidEnPassantPawnError(_KindError):
    _what = "Only a pawn can capture en passant"


class InvalidEnPassantTargetError(MoveError):
    def __init__(self, square: Square) -> None:
        self.square = square
        super().__init__(f"No opposing pawn to capture en passant on {square}")
