"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    GameResult,
    MoveAction,
    MoveStatus,
    Occupancy,
    PieceType,
)
from chessrules.core.errors import (
    FenParseError,
    IncompletePiecePlacementError,
    InvalidCastlingError,
    InvalidCastlingKingError,
    InvalidCastlingRookError,
    InvalidColorError,
    InvalidEnPassantPawnError,
    InvalidEnPassantTargetError,
    InvalidFileError,
    InvalidNumberError,
    InvalidPieceError,
    InvalidPromotionPawnError,
    InvalidRankError,
    MoveError,
    OutOfTurnError,
    PieceMismatchError,
    PieceMissingError,
    UnexpectedEndError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    annotated_move_text,
    move_to_text,
    parse_uci,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Offset,
    Square,
    is_valid_square,
    parse_square,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveAction",
    "MoveStatus",
    "Occupancy",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "Offset",
    "Square",
    "is_valid_square",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Errors
    "FenParseError",
    "IncompletePiecePlacementError",
    "InvalidCastlingError",
    "InvalidColorError",
    "InvalidFileError",
    "InvalidNumberError",
    "InvalidPieceError",
    "InvalidRankError",
    "UnexpectedEndError",
    "MoveError",
    "InvalidCastlingKingError",
    "InvalidCastlingRookError",
    "InvalidEnPassantPawnError",
    "InvalidEnPassantTargetError",
    "InvalidPromotionPawnError",
    "OutOfTurnError",
    "PieceMismatchError",
    "PieceMissingError",
    # Notation
    "STARTING_FEN",
    "annotated_move_text",
    "move_to_text",
    "parse_uci",
    "position_from_fen",
    "position_to_fen",
]
