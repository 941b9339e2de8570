"""Move generator tests: per-piece geometry, special moves and perft.

Perft reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from chessrules.core.enums import PROMOTION_TYPES, Color, MoveAction, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import STARTING_FEN, position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import (
    A1, B6, C1, C4, D2, D4, D5, D6, D8, E1, E3, E4, E5, E8, F3, G4, G5,
    H4, H8,
    parse_square,
)


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*."""
    if depth == 0:
        return 1
    moves = MoveGenerator(position).generate_legal_moves()
    if depth == 1:
        return len(moves)
    return sum(perft(position.apply_move(move), depth - 1) for move in moves)


def _destinations(position: Position, sq, piece_type: PieceType) -> set:
    piece = Piece(Color.WHITE, piece_type)
    position.board[sq] = piece
    moves = MoveGenerator(position).piece_moves(sq, piece)
    destinations = {m.to_sq for m in moves}
    assert len(destinations) == len(moves), "duplicate destinations"
    return destinations


# ── Piece geometry on an empty board ─────────────────────────────────────────


class TestEmptyBoardGeometry:
    def test_bishop_d4(self, empty_position: Position) -> None:
        dests = _destinations(empty_position, D4, PieceType.BISHOP)
        assert len(dests) == 13
        assert {A1, B6, H8, E3} <= dests

    def test_rook_d4(self, empty_position: Position) -> None:
        dests = _destinations(empty_position, D4, PieceType.ROOK)
        assert len(dests) == 14
        assert {C4, D2, G4, D8} <= dests

    def test_queen_d4(self, empty_position: Position) -> None:
        dests = _destinations(empty_position, D4, PieceType.QUEEN)
        assert len(dests) == 27

    def test_knight_f3(self, empty_position: Position) -> None:
        dests = _destinations(empty_position, F3, PieceType.KNIGHT)
        assert len(dests) == 8
        assert {G5, H4, E1, D4} <= dests

    def test_king_e4(self, empty_position: Position) -> None:
        dests = _destinations(empty_position, E4, PieceType.KING)
        assert len(dests) == 8


class TestSlidingBlockers:
    def test_stops_before_own_piece_and_on_capture(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/8/8/3P4/3RK3 w - - 0 1")
        rook = Piece(Color.WHITE, PieceType.ROOK)
        moves = MoveGenerator(pos).piece_moves(parse_square("d1"), rook)
        dests = {m.to_sq for m in moves}
        # d2 is own pawn: the up ray is empty; left ray reaches a1
        assert dests == {C1, parse_square("b1"), A1}

    def test_capture_ends_ray(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 0 1")
        queen = Piece(Color.WHITE, PieceType.QUEEN)
        moves = MoveGenerator(pos).piece_moves(parse_square("d1"), queen)
        file_moves = [m for m in moves if m.to_sq.file == 4]
        assert [m.to_sq for m in file_moves][-1] == D5
        assert file_moves[-1].action == MoveAction.CAPTURE
        assert all(m.action == MoveAction.MOVE for m in file_moves[:-1])


# ── Starting position ────────────────────────────────────────────────────────


class TestStartingPosition:
    def test_twenty_moves(self) -> None:
        moves = Position.starting().legal_moves()
        assert len(moves) == 20

    def test_no_captures(self) -> None:
        moves = Position.starting().legal_moves()
        assert not any(m.is_capture for m in moves)

    def test_sixteen_pawn_and_four_knight_moves(self) -> None:
        moves = Position.starting().legal_moves()
        kinds = [m.piece.piece_type for m in moves]
        assert kinds.count(PieceType.PAWN) == 16
        assert kinds.count(PieceType.KNIGHT) == 4

    def test_black_to_move_generates_black_moves(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        moves = pos.legal_moves()
        assert len(moves) == 20
        assert all(m.piece.color == Color.BLACK for m in moves)


# ── Pawns ────────────────────────────────────────────────────────────────────


class TestPawnMoves:
    def test_double_step_blocked_by_piece_in_path(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        pawn_moves = [m for m in pos.legal_moves() if m.piece.piece_type == PieceType.PAWN]
        assert pawn_moves == []

    def test_double_step_blocked_on_second_square(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1")
        pawn_moves = [m for m in pos.legal_moves() if m.piece.piece_type == PieceType.PAWN]
        assert [m.to_sq for m in pawn_moves] == [E3]

    def test_black_pawn_moves_down(self) -> None:
        pos = position_from_fen("4k3/4p3/8/8/8/8/8/4K3 b - - 0 1")
        pawn_moves = {m.to_sq for m in pos.legal_moves() if m.piece.piece_type == PieceType.PAWN}
        assert pawn_moves == {parse_square("e6"), E5}

    def test_diagonal_capture(self) -> None:
        pos = position_from_fen("4k3/8/8/3p1p2/4P3/8/8/4K3 w - - 0 1")
        captures = [m for m in pos.legal_moves() if m.action == MoveAction.CAPTURE]
        assert {m.to_sq for m in captures} == {D5, parse_square("f5")}

    def test_no_capture_of_own_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/3P4/4P3/8/8/4K3 w - - 0 1")
        assert not any(m.is_capture for m in pos.legal_moves())

    def test_en_passant(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        ep = [m for m in pos.legal_moves() if m.action == MoveAction.EN_PASSANT]
        assert len(ep) == 1
        assert ep[0].from_sq == E5
        assert ep[0].to_sq == D6

    def test_no_en_passant_of_own_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/3PP3/8/8/8/4K3 w - d6 0 1")
        assert not any(m.action == MoveAction.EN_PASSANT for m in pos.legal_moves())

    def test_no_en_passant_without_pawn_behind_target(self) -> None:
        pos = position_from_fen("4k3/8/8/3nP3/8/8/8/4K3 w - d6 0 1")
        assert not any(m.action == MoveAction.EN_PASSANT for m in pos.legal_moves())

    def test_stale_target_on_hand_built_position(self) -> None:
        # e3 target with white to move: nothing behind it to capture
        pos = Position.starting()
        pos.en_passant = E3
        moves = pos.legal_moves()
        assert len(moves) == 20
        assert not any(m.action == MoveAction.EN_PASSANT for m in moves)

    def test_no_en_passant_without_target(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - - 0 2")
        assert not any(m.action == MoveAction.EN_PASSANT for m in pos.legal_moves())

    def test_promotion_push(self) -> None:
        pos = position_from_fen("8/4P3/8/8/8/k7/8/4K3 w - - 0 1")
        promos = [m for m in pos.legal_moves() if m.action == MoveAction.MOVE_PROMOTION]
        assert {m.promotion for m in promos} == set(PROMOTION_TYPES)
        assert all(m.to_sq == E8 for m in promos)

    def test_capture_promotion(self) -> None:
        pos = position_from_fen("3r4/4P3/8/8/8/k7/8/4K3 w - - 0 1")
        promos = [m for m in pos.legal_moves() if m.action == MoveAction.CAPTURE_PROMOTION]
        assert len(promos) == 4
        assert all(m.to_sq == D8 for m in promos)

    def test_black_promotion(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/p7/4K3 b - - 0 1")
        promos = [m for m in pos.legal_moves() if m.action == MoveAction.MOVE_PROMOTION]
        assert len(promos) == 4
        assert all(m.to_sq == A1 for m in promos)


# ── Castling ─────────────────────────────────────────────────────────────────


def _castles(fen: str) -> set[MoveAction]:
    pos = position_from_fen(fen)
    return {m.action for m in pos.legal_moves() if m.action.is_castle}


class TestCastling:
    def test_both_sides_available(self) -> None:
        castles = _castles("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert castles == {MoveAction.SHORT_CASTLE, MoveAction.LONG_CASTLE}

    def test_destinations(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        castles = {m.action: m.to_sq for m in pos.legal_moves() if m.action.is_castle}
        assert castles[MoveAction.SHORT_CASTLE] == parse_square("g8")
        assert castles[MoveAction.LONG_CASTLE] == parse_square("c8")

    def test_blocked_in_starting_position(self) -> None:
        assert _castles(STARTING_FEN) == set()

    def test_without_rights(self) -> None:
        assert _castles("r3k2r/8/8/8/8/8/8/R3K2R w kq - 0 1") == set()

    def test_not_through_attacked_square(self) -> None:
        # Black rook on f8 covers f1
        castles = _castles("5r1k/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert castles == {MoveAction.LONG_CASTLE}

    def test_not_out_of_check(self) -> None:
        assert _castles("4r2k/8/8/8/8/8/8/R3K2R w KQ - 0 1") == set()

    def test_attacked_b_file_does_not_prevent_long_castle(self) -> None:
        castles = _castles("1r5k/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert MoveAction.LONG_CASTLE in castles

    def test_requires_rook_on_home_square(self) -> None:
        assert _castles("4k3/8/8/8/8/8/8/R3K3 w KQ - 0 1") == {MoveAction.LONG_CASTLE}


# ── Check and legality ───────────────────────────────────────────────────────


class TestCheckDetection:
    def test_starting_not_in_check(self) -> None:
        assert not Position.starting().is_in_check(Color.WHITE)
        assert not Position.starting().is_in_check(Color.BLACK)

    def test_rook_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)
        assert not pos.is_in_check(Color.BLACK)

    def test_pawn_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/3p4/4K3 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)

    def test_blocked_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4r1K1 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3NK2 w - - 0 1")
        assert not pos.is_in_check(Color.WHITE)

    def test_no_king_is_not_check(self, empty_position: Position) -> None:
        assert not empty_position.is_in_check(Color.WHITE)

    def test_square_attacked(self) -> None:
        gen = MoveGenerator(Position.starting())
        assert gen.is_square_attacked(F3, Color.WHITE)
        assert gen.is_square_attacked(parse_square("f6"), Color.BLACK)
        assert not gen.is_square_attacked(E4, Color.WHITE)
        assert not gen.is_square_attacked(E4, Color.BLACK)


class TestLegalityFilter:
    def test_pinned_piece_cannot_move(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        pseudo = pos.pseudo_legal_moves()
        legal = pos.legal_moves()
        assert any(m.piece.piece_type == PieceType.BISHOP for m in pseudo)
        assert not any(m.piece.piece_type == PieceType.BISHOP for m in legal)

    def test_king_cannot_step_into_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/3rK3 w - - 0 1")
        dests = {m.to_sq for m in pos.legal_moves()}
        assert dests == {
            parse_square("d1"),  # capture the rook
            parse_square("e2"),
            parse_square("f2"),
        }

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        # Capturing on d6 would open the fifth rank for the black rook
        pos = position_from_fen("8/8/8/K2pP2r/8/8/8/7k w - d6 0 2")
        assert not any(m.action == MoveAction.EN_PASSANT for m in pos.legal_moves())

    def test_pseudo_legal_for_other_color(self) -> None:
        gen = MoveGenerator(Position.starting())
        moves = gen.generate_pseudo_legal_moves(Color.BLACK)
        assert len(moves) == 20
        assert all(m.piece.color == Color.BLACK for m in moves)


# ── Structural property ──────────────────────────────────────────────────────

_SAMPLE_FENS = [
    STARTING_FEN,
    "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
    "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
    "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
]


@pytest.mark.parametrize("fen", _SAMPLE_FENS)
def test_moves_always_change_square(fen: str) -> None:
    pos = position_from_fen(fen)
    for move in pos.pseudo_legal_moves():
        assert move.from_sq != move.to_sq
        assert move.piece == pos.board[move.from_sq]


# ── Perft: starting position ─────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 1) == 20

    def test_depth_2(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 3) == 8_902


# ── Kiwipete (rich in tactics: castling, ep, promotions) ─────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert perft(pos, 1) == 48

    def test_depth_2(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert perft(pos, 2) == 2_039

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert perft(pos, 3) == 97_862


# ── Position 3: en-passant + promotion edge cases ───────────────────────────

POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPos3:
    def test_depth_1(self) -> None:
        pos = position_from_fen(POS3)
        assert perft(pos, 1) == 14

    def test_depth_2(self) -> None:
        pos = position_from_fen(POS3)
        assert perft(pos, 2) == 191

    def test_depth_3(self) -> None:
        pos = position_from_fen(POS3)
        assert perft(pos, 3) == 2_812


# ── Position 4: mirrored, many promotions ────────────────────────────────────

POS4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"


class TestPerftPos4:
    def test_depth_1(self) -> None:
        pos = position_from_fen(POS4)
        assert perft(pos, 1) == 6

    def test_depth_2(self) -> None:
        pos = position_from_fen(POS4)
        assert perft(pos, 2) == 264

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos = position_from_fen(POS4)
        assert perft(pos, 3) == 9_467


# ── Position 5 ───────────────────────────────────────────────────────────────

POS5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerftPos5:
    def test_depth_1(self) -> None:
        pos = position_from_fen(POS5)
        assert perft(pos, 1) == 44

    def test_depth_2(self) -> None:
        pos = position_from_fen(POS5)
        assert perft(pos, 2) == 1_486

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos = position_from_fen(POS5)
        assert perft(pos, 3) == 62_379
