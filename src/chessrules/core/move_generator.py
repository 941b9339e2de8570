"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    MoveAction,
    Occupancy,
    PieceType,
)
from chessrules.core.geometry import (
    all_rays,
    diagonal_rays,
    king_squares,
    knight_squares,
    straight_rays,
)
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

KING_HOME_FILE = 5

# action -> (rook home file, king destination file)
CASTLING_FILES: dict[MoveAction, tuple[int, int]] = {
    MoveAction.SHORT_CASTLE: (8, 7),
    MoveAction.LONG_CASTLE: (1, 3),
}

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Never mutates the position: the legality filter works on copies made by
    :meth:`Position.apply_move`.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        moving_color = self._pos.side_to_move
        legal: list[Move] = []
        for move in self.generate_pseudo_legal_moves():
            after = self._pos.apply_move(move)
            if not MoveGenerator(after).is_in_check(moving_color):
                legal.append(move)
        _LOGGER.debug("%d legal moves for %s", len(legal), moving_color)
        return legal

    def generate_pseudo_legal_moves(
        self,
        color: Color | None = None,
        *,
        include_castling: bool = True,
    ) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check).

        *color* defaults to the side to move.
        """
        if color is None:
            color = self._pos.side_to_move
        moves: list[Move] = []
        for sq, piece in self._board.items():
            if piece.color == color:
                self._gen_piece(sq, piece, moves, include_castling)
        return moves

    def piece_moves(self, sq: Square, piece: Piece) -> list[Move]:
        """Pseudo-legal moves of *piece* standing on *sq*."""
        moves: list[Move] = []
        self._gen_piece(sq, piece, moves, True)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Can the opponent's pseudo-legal moves reach *color*'s king?

        A side without a king is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        opponent_moves = self.generate_pseudo_legal_moves(
            color.opposite, include_castling=False
        )
        return any(move.to_sq == king_sq for move in opponent_moves)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        board = self._board

        pawn_rank = sq.rank - by_color.pawn_direction
        for df in (-1, 1):
            from_sq = Square.of(sq.file + df, pawn_rank)
            if from_sq is not None and board[from_sq] == Piece(by_color, PieceType.PAWN):
                return True

        knight = Piece(by_color, PieceType.KNIGHT)
        if any(board[to_sq] == knight for to_sq in knight_squares(sq)):
            return True

        king = Piece(by_color, PieceType.KING)
        if any(board[to_sq] == king for to_sq in king_squares(sq)):
            return True

        for rays, sliders in (
            (diagonal_rays(sq), _DIAGONAL_SLIDERS),
            (straight_rays(sq), _STRAIGHT_SLIDERS),
        ):
            for ray in rays:
                for to_sq in ray:
                    piece = board[to_sq]
                    if piece is None:
                        continue
                    if piece.color == by_color and piece.piece_type in sliders:
                        return True
                    break

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(
        self,
        sq: Square,
        piece: Piece,
        moves: list[Move],
        include_castling: bool,
    ) -> None:
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_jumps(sq, piece, knight_squares(sq), moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece, diagonal_rays(sq), moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece, straight_rays(sq), moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece, all_rays(sq), moves)
        else:
            self._gen_jumps(sq, piece, king_squares(sq), moves)
            if include_castling:
                self._gen_castling(sq, piece, moves)

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        step = color.pawn_direction
        enemy_pawn = Piece(color.opposite, PieceType.PAWN)

        one_step = Square.of(sq.file, sq.rank + step)
        if one_step is not None and board.is_empty(one_step):
            self._add_pawn_move(sq, piece, one_step, False, moves)
            if sq.rank == color.pawn_rank:
                two_step = Square(sq.file, sq.rank + 2 * step)
                if board.is_empty(two_step):
                    moves.append(Move(piece, sq, two_step))

        for df in (-1, 1):
            cap_sq = Square.of(sq.file + df, sq.rank + step)
            if cap_sq is None:
                continue
            occupancy = board.occupancy(cap_sq, color)
            if occupancy == Occupancy.OPPOSITE_COLOR:
                self._add_pawn_move(sq, piece, cap_sq, True, moves)
            elif (
                occupancy == Occupancy.EMPTY
                and cap_sq == self._pos.en_passant
                and board[Square(cap_sq.file, sq.rank)] == enemy_pawn
            ):
                moves.append(Move(piece, sq, cap_sq, MoveAction.EN_PASSANT))

    @staticmethod
    def _add_pawn_move(
        sq: Square,
        piece: Piece,
        to_sq: Square,
        is_capture: bool,
        moves: list[Move],
    ) -> None:
        if to_sq.rank == piece.color.promotion_rank:
            action = (
                MoveAction.CAPTURE_PROMOTION if is_capture else MoveAction.MOVE_PROMOTION
            )
            for pt in PROMOTION_TYPES:
                moves.append(Move(piece, sq, to_sq, action, pt))
        else:
            action = MoveAction.CAPTURE if is_capture else MoveAction.MOVE
            moves.append(Move(piece, sq, to_sq, action))

    def _gen_jumps(
        self,
        sq: Square,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            occupancy = board.occupancy(to_sq, piece.color)
            if occupancy == Occupancy.EMPTY:
                moves.append(Move(piece, sq, to_sq))
            elif occupancy == Occupancy.OPPOSITE_COLOR:
                moves.append(Move(piece, sq, to_sq, MoveAction.CAPTURE))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                occupancy = board.occupancy(to_sq, piece.color)
                if occupancy == Occupancy.SAME_COLOR:
                    break
                if occupancy == Occupancy.OPPOSITE_COLOR:
                    moves.append(Move(piece, sq, to_sq, MoveAction.CAPTURE))
                    break
                moves.append(Move(piece, sq, to_sq))

    def _gen_castling(self, king_sq: Square, piece: Piece, moves: list[Move]) -> None:
        color = piece.color
        rank = color.back_rank
        if king_sq != Square(KING_HOME_FILE, rank):
            return
        if not self._pos.castling & CastlingRights.both(color):
            return

        board = self._board
        opponent = color.opposite
        if self.is_square_attacked(king_sq, opponent):
            return

        rook = Piece(color, PieceType.ROOK)
        for action, (rook_file, king_to_file) in CASTLING_FILES.items():
            right = (
                CastlingRights.kingside(color)
                if action == MoveAction.SHORT_CASTLE
                else CastlingRights.queenside(color)
            )
            if not self._pos.castling & right:
                continue
            if board[Square(rook_file, rank)] != rook:
                continue

            step = 1 if rook_file > KING_HOME_FILE else -1
            between = range(KING_HOME_FILE + step, rook_file, step)
            if not all(board.is_empty(Square(f, rank)) for f in between):
                continue

            king_path = range(KING_HOME_FILE + step, king_to_file + step, step)
            if any(self.is_square_attacked(Square(f, rank), opponent) for f in king_path):
                continue

            moves.append(Move(piece, king_sq, Square(king_to_file, rank), action))
