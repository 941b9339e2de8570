"""Position: complete game state (board + metadata) and move application."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveAction, Occupancy, PieceType
from chessrules.core.errors import (
    InvalidCastlingKingError,
    InvalidCastlingRookError,
    InvalidEnPassantPawnError,
    InvalidEnPassantTargetError,
    InvalidPromotionPawnError,
    OutOfTurnError,
    PieceMismatchError,
    PieceMissingError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import CASTLING_FILES, KING_HOME_FILE, MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import A1, A8, H1, H8, Square

_LOGGER = logging.getLogger(__name__)

# castling action -> (rook origin file, rook destination file)
_CASTLING_ROOK_FILES: dict[MoveAction, tuple[int, int]] = {
    MoveAction.SHORT_CASTLE: (8, 6),
    MoveAction.LONG_CASTLE: (1, 4),
}


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Applying a move never mutates the receiver; :meth:`apply_move` returns the
    successor position, so a rejected move leaves nothing half-done.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        if halfmove_clock < 0:
            raise ValueError(f"Halfmove clock must be >= 0: {halfmove_clock}")
        if fullmove_number < 1:
            raise ValueError(f"Fullmove number must be >= 1: {fullmove_number}")
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Position:
        """Empty board, white to move, no castling rights."""
        return cls(Board(), castling=CastlingRights.NONE)

    @classmethod
    def starting(cls) -> Position:
        """Standard initial position."""
        return cls(Board.initial())

    # ── Queries ──────────────────────────────────────────────────────────

    def pieces(self) -> list[tuple[Square, Piece]]:
        return self.board.items()

    def pieces_of(self, color: Color) -> list[tuple[Square, Piece]]:
        return [(sq, p) for sq, p in self.board.items() if p.color == color]

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def occupancy(self, sq: Square, color: Color) -> Occupancy:
        return self.board.occupancy(sq, color)

    def king_square(self, color: Color) -> Square | None:
        return self.board.king_square(color)

    def is_in_check(self, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) is in check."""
        if color is None:
            color = self.side_to_move
        return MoveGenerator(self).is_in_check(color)

    def pseudo_legal_moves(self) -> list[Move]:
        return MoveGenerator(self).generate_pseudo_legal_moves()

    def legal_moves(self) -> list[Move]:
        return MoveGenerator(self).generate_legal_moves()

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, move: Move) -> Position:
        """Return the position after *move*.

        Raises a :class:`~chessrules.core.errors.MoveError` when the move does
        not fit this position, e.g. because it was generated for another one.
        """
        try:
            return self._successor(move)
        except ValueError as exc:
            _LOGGER.debug("Rejected move %s: %s", move, exc)
            raise

    def _successor(self, move: Move) -> Position:
        pos = self.copy()
        board = pos.board

        # Lift piece from origin
        piece = board.pop(move.from_sq)
        if piece is None:
            raise PieceMissingError(move.from_sq)
        if piece != move.piece:
            raise PieceMismatchError(move.from_sq)
        if piece.color != self.side_to_move:
            raise OutOfTurnError(piece.color)

        captured = board[move.to_sq]
        action = move.action

        if action.is_promotion:
            if piece.piece_type != PieceType.PAWN:
                raise InvalidPromotionPawnError(piece.piece_type)
            assert move.promotion is not None
            board[move.to_sq] = piece.promoted(move.promotion)
        elif action.is_castle:
            rank = piece.color.back_rank
            king_to = Square(CASTLING_FILES[action][1], rank)
            if (
                piece.piece_type != PieceType.KING
                or move.from_sq != Square(KING_HOME_FILE, rank)
                or move.to_sq != king_to
            ):
                raise InvalidCastlingKingError(piece.piece_type)
            board[move.to_sq] = piece
            rook_from_file, rook_to_file = _CASTLING_ROOK_FILES[action]
            rook_from = Square(rook_from_file, rank)
            rook = board.pop(rook_from)
            if rook is None:
                raise PieceMissingError(rook_from)
            if rook.piece_type != PieceType.ROOK:
                raise InvalidCastlingRookError(rook.piece_type)
            board[Square(rook_to_file, rank)] = rook
        elif action == MoveAction.EN_PASSANT:
            if piece.piece_type != PieceType.PAWN:
                raise InvalidEnPassantPawnError(piece.piece_type)
            board[move.to_sq] = piece
            # The captured pawn sits beside the origin, behind the target
            ep_capture_sq = Square(move.to_sq.file, move.from_sq.rank)
            captured = board.pop(ep_capture_sq)
            if captured is None:
                raise PieceMissingError(ep_capture_sq)
            if captured != Piece(piece.color.opposite, PieceType.PAWN):
                raise InvalidEnPassantTargetError(ep_capture_sq)
        else:
            board[move.to_sq] = piece

        # Clocks
        if piece.piece_type == PieceType.PAWN or action.is_capture or captured is not None:
            pos.halfmove_clock = 0
        else:
            pos.halfmove_clock += 1

        pos.castling = self._next_castling(move, piece)

        # En passant target for the opponent
        pos.en_passant = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.rank - move.from_sq.rank) == 2
        ):
            pos.en_passant = Square(
                move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2
            )

        if self.side_to_move == Color.BLACK:
            pos.fullmove_number += 1
        pos.side_to_move = self.side_to_move.opposite
        return pos

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        A1: CastlingRights.WHITE_QUEENSIDE,
        H1: CastlingRights.WHITE_KINGSIDE,
        A8: CastlingRights.BLACK_QUEENSIDE,
        H8: CastlingRights.BLACK_KINGSIDE,
    }

    def _next_castling(self, move: Move, piece: Piece) -> CastlingRights:
        next_castling = self.castling
        if piece.piece_type == PieceType.KING:
            next_castling &= ~CastlingRights.both(piece.color)

        # A rook leaving its corner, or captured on it, retires that right.
        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                next_castling &= ~self._ROOK_CORNERS[sq]
        return next_castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        return (
            f"{self.board!r}\n"
            f"{self.side_to_move} to move, castling={self.castling!r}, "
            f"ep={self.en_passant}, clocks={self.halfmove_clock}/{self.fullmove_number}"
        )
