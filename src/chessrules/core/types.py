"""Square and offset value types plus coordinate helpers.

Files and ranks are both numbered 1–8: ``Square(1, 1)`` is a1 and
``Square(8, 8)`` is h8.
"""

from __future__ import annotations

from dataclasses import dataclass

FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


def is_valid_square(file: int, rank: int) -> bool:
    """Check whether *file* and *rank* both lie on the board."""
    return 1 <= file <= 8 and 1 <= rank <= 8


@dataclass(frozen=True, slots=True)
class Offset:
    """Signed file/rank delta between two squares."""

    dfile: int
    drank: int


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate.

    Direct construction expects statically valid coordinates and raises
    ``ValueError`` otherwise; use :meth:`of` for anything derived from input.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_valid_square(self.file, self.rank):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    @classmethod
    def of(cls, file: int, rank: int) -> Square | None:
        """Validating constructor: ``None`` when off the board."""
        if not is_valid_square(file, rank):
            return None
        return cls(file, rank)

    def translate(self, offset: Offset) -> Square | None:
        """Square reached by *offset*, or ``None`` if it leaves the board."""
        return Square.of(self.file + offset.dfile, self.rank + offset.drank)

    @property
    def name(self) -> str:
        return FILE_LETTERS[self.file - 1] + RANK_DIGITS[self.rank - 1]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square(5, 4)``."""
    if len(name) != 2 or name[0] not in FILE_LETTERS or name[1] not in RANK_DIGITS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(FILE_LETTERS.index(name[0]) + 1, RANK_DIGITS.index(name[1]) + 1)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for rank in range(1, 9) for file in range(1, 9)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
