"""chessmate: a two-player console chess game."""

__version__ = "0.1.0"
