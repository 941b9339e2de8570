"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Rank delta of a single pawn step."""
        return 1 if self == Color.WHITE else -1

    @property
    def back_rank(self) -> int:
        return 1 if self == Color.WHITE else 8

    @property
    def pawn_rank(self) -> int:
        """Rank the pawns of this color start on."""
        return 2 if self == Color.WHITE else 7

    @property
    def promotion_rank(self) -> int:
        return 8 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.QUEEN,
)


class Occupancy(IntEnum):
    """Contents of a square relative to a given color."""

    EMPTY = 0
    SAME_COLOR = 1
    OPPOSITE_COLOR = 2


class MoveAction(IntEnum):
    """What a move does on the board."""

    MOVE = 0
    CAPTURE = 1
    EN_PASSANT = 2
    MOVE_PROMOTION = 3
    CAPTURE_PROMOTION = 4
    SHORT_CASTLE = 5
    LONG_CASTLE = 6

    @property
    def is_capture(self) -> bool:
        return self in (
            MoveAction.CAPTURE,
            MoveAction.EN_PASSANT,
            MoveAction.CAPTURE_PROMOTION,
        )

    @property
    def is_promotion(self) -> bool:
        return self in (MoveAction.MOVE_PROMOTION, MoveAction.CAPTURE_PROMOTION)

    @property
    def is_castle(self) -> bool:
        return self in (MoveAction.SHORT_CASTLE, MoveAction.LONG_CASTLE)


class MoveStatus(IntEnum):
    """Effect of a move on the opponent."""

    NONE = 0
    CHECK = 1
    CHECKMATE = 2


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KINGSIDE if color == Color.WHITE else cls.BLACK_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_QUEENSIDE if color == Color.WHITE else cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
