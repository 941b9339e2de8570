"""chessrules: chess position model, move generator and FEN codec."""

__version__ = "0.1.0"
