"""Command-line entry point: show a position and the moves available in it."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.core.enums import GameResult
from chessrules.core.notation import (
    STARTING_FEN,
    annotated_move_text,
    parse_uci,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.rules import Rules
from chessrules.display import render_board

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Render a chess position and list its legal moves.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="FEN record to load (default: the starting position)",
    )
    parser.add_argument(
        "--play",
        nargs="+",
        default=[],
        metavar="UCI",
        help="moves to apply in order, e.g. e2e4 e7e5",
    )
    parser.add_argument(
        "--moves",
        action="store_true",
        help="list the legal moves of the resulting position",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        position = position_from_fen(args.fen)
        for uci in args.play:
            move = parse_uci(position, uci)
            _LOGGER.info("Playing %s", annotated_move_text(position, move))
            position = position.apply_move(move)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(render_board(position.board, coordinates=True))
    print(position_to_fen(position))

    result = Rules.game_result(position)
    if result != GameResult.IN_PROGRESS:
        print(f"Result: {result.name.lower().replace('_', ' ')}")

    if args.moves:
        moves = sorted(
            (annotated_move_text(position, m) for m in position.legal_moves()),
        )
        print(f"{len(moves)} legal moves: {' '.join(moves)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
