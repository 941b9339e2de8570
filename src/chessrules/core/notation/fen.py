"""FEN parsing and serialization."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import (
    FenParseError,
    IncompletePiecePlacementError,
    InvalidCastlingError,
    InvalidColorError,
    InvalidFileError,
    InvalidNumberError,
    InvalidPieceError,
    InvalidRankError,
    UnexpectedEndError,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import FILE_LETTERS, RANK_DIGITS, Square, parse_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises a :class:`~chessrules.core.errors.FenParseError` subclass naming the
    first problem found; fields after the sixth are ignored.
    """
    try:
        return _decode(fen)
    except FenParseError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        raise


def _decode(fen: str) -> Position:
    fields = _fields(fen)
    board = _parse_placement(next(fields))
    side = _parse_side(next(fields))
    castling = _parse_castling(next(fields))
    ep = _parse_en_passant(next(fields), side)
    halfmove = _parse_number(next(fields))
    fullmove = _parse_number(next(fields))
    if fullmove < 1:
        raise InvalidNumberError(str(fullmove))
    return Position(board, side, castling, ep, halfmove, fullmove)


def _fields(fen: str) -> Iterator[str]:
    yield from fen.split()
    raise UnexpectedEndError()


# 1. Piece placement


def _parse_placement(field: str) -> Board:
    board = Board()
    rank = 8
    file = 1
    for ch in field:
        if ch == "/":
            if file != 9:
                raise IncompletePiecePlacementError()
            rank -= 1
            file = 1
        elif ch in "12345678":
            file += int(ch)
            if file > 9:
                raise IncompletePiecePlacementError()
        else:
            try:
                piece = Piece.from_char(ch)
            except ValueError:
                raise InvalidPieceError(ch) from None
            sq = Square.of(file, rank)
            if sq is None:
                raise IncompletePiecePlacementError()
            board[sq] = piece
            file += 1

    if rank != 1 or file != 9:
        raise IncompletePiecePlacementError()
    return board


# 2. Side to move


def _parse_side(field: str) -> Color:
    ch = field[0]
    if ch == "w":
        side = Color.WHITE
    elif ch == "b":
        side = Color.BLACK
    else:
        raise InvalidColorError(ch)
    if len(field) > 1:
        raise InvalidColorError(field[1])
    return side


# 3. Castling


def _parse_castling(field: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    for ch in field:
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise InvalidCastlingError(ch)
        castling |= right
    return castling


# 4. En passant


def _parse_en_passant(field: str, side: Color) -> Square | None:
    if field == "-":
        return None
    if field[0] not in FILE_LETTERS:
        raise InvalidFileError(field[0])
    if len(field) < 2:
        raise UnexpectedEndError()
    if field[1] not in RANK_DIGITS:
        raise InvalidRankError(field[1])
    if len(field) > 2:
        raise InvalidRankError(field[2])
    # The target sits behind a pawn that just made a double step
    expected_rank = "6" if side == Color.WHITE else "3"
    if field[1] != expected_rank:
        raise InvalidRankError(field[1])
    return parse_square(field)


# 5–6. Clocks


def _parse_number(field: str) -> int:
    if not (field.isascii() and field.isdigit()):
        raise InvalidNumberError(field)
    return int(field)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(8, 0, -1):
        empty = 0
        row = ""
        for file in range(1, 9):
            piece = pos.board[Square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = str(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
