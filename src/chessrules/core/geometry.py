"""Board geometry: offsets, rays and jump sets, precomputed per square."""

from __future__ import annotations

from chessrules.core.types import ALL_SQUARES, Offset, Square, is_valid_square

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    Offset(-2, -1),
    Offset(-2, 1),
    Offset(-1, -2),
    Offset(-1, 2),
    Offset(1, -2),
    Offset(1, 2),
    Offset(2, -1),
    Offset(2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    Offset(-1, -1),
    Offset(-1, 0),
    Offset(-1, 1),
    Offset(0, -1),
    Offset(0, 1),
    Offset(1, -1),
    Offset(1, 0),
    Offset(1, 1),
)

DIAGONAL_DIRS: tuple[Offset, ...] = (
    Offset(-1, -1),
    Offset(-1, 1),
    Offset(1, -1),
    Offset(1, 1),
)
STRAIGHT_DIRS: tuple[Offset, ...] = (
    Offset(-1, 0),
    Offset(1, 0),
    Offset(0, -1),
    Offset(0, 1),
)
ALL_DIRS: tuple[Offset, ...] = DIAGONAL_DIRS + STRAIGHT_DIRS


def translate(square: Square, offset: Offset) -> Square | None:
    """Candidate square reached by *offset*; ``None`` when off the board."""
    return square.translate(offset)


def line_of_squares(origin: Square, direction: Offset) -> tuple[Square, ...]:
    """Squares from one step past *origin* to the board edge along *direction*."""
    if direction == Offset(0, 0):
        raise ValueError("Direction must be non-zero")
    squares: list[Square] = []
    file = origin.file + direction.dfile
    rank = origin.rank + direction.drank
    while is_valid_square(file, rank):
        squares.append(Square(file, rank))
        file += direction.dfile
        rank += direction.drank
    return tuple(squares)


def _jump_squares(origin: Square, offsets: tuple[Offset, ...]) -> tuple[Square, ...]:
    targets: list[Square] = []
    for offset in offsets:
        target = origin.translate(offset)
        if target is not None:
            targets.append(target)
    return tuple(targets)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[Offset, ...],
) -> dict[Square, tuple[Square, ...]]:
    return {sq: _jump_squares(sq, offsets) for sq in ALL_SQUARES}


def _build_rays(
    directions: tuple[Offset, ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays = (line_of_squares(sq, d) for d in directions)
        rays[sq] = tuple(ray for ray in square_rays if ray)
    return rays


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_DIAGONAL_RAYS = _build_rays(DIAGONAL_DIRS)
_STRAIGHT_RAYS = _build_rays(STRAIGHT_DIRS)
_ALL_RAYS = _build_rays(ALL_DIRS)


def knight_squares(origin: Square) -> tuple[Square, ...]:
    """On-board squares a knight on *origin* jumps to."""
    return _KNIGHT_TARGETS[origin]


def king_squares(origin: Square) -> tuple[Square, ...]:
    """On-board squares adjacent to *origin*."""
    return _KING_TARGETS[origin]


def diagonal_rays(origin: Square) -> tuple[tuple[Square, ...], ...]:
    return _DIAGONAL_RAYS[origin]


def straight_rays(origin: Square) -> tuple[tuple[Square, ...], ...]:
    return _STRAIGHT_RAYS[origin]


def all_rays(origin: Square) -> tuple[tuple[Square, ...], ...]:
    return _ALL_RAYS[origin]
