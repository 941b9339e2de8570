"""Plain-text board rendering with box-drawing characters."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.types import Square

_TOP = "┏━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┯━━━┓"
_SEPARATOR = "┠───┼───┼───┼───┼───┼───┼───┼───┨"
_BOTTOM = "┗━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┷━━━┛"
_EMPTY = " "


def render_board(board: Board, *, coordinates: bool = False) -> str:
    """Draw *board* with rank 8 at the top, one glyph per square.

    With *coordinates*, rank numbers and file letters are drawn alongside.
    """
    margin = "  " if coordinates else ""
    lines = [margin + _TOP]
    for rank in range(8, 0, -1):
        cells = []
        for file in range(1, 9):
            piece = board[Square(file, rank)]
            cells.append(piece.symbol if piece is not None else _EMPTY)
        label = f"{rank} " if coordinates else ""
        lines.append(f"{label}┃ {' │ '.join(cells)} ┃")
        if rank > 1:
            lines.append(margin + _SEPARATOR)
    lines.append(margin + _BOTTOM)
    if coordinates:
        lines.append(margin + "  " + "   ".join("abcdefgh"))
    return "\n".join(lines)
