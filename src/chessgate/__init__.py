"""chessgate — chess move legality on an 8x8 board, with a small Qt front end."""

__version__ = "0.1.0"
