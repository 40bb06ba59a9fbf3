"""Data layer utilities for loading board text."""

from .board_loader import load_board, parse_board
from .errors import BoardError, BoardLoadError, InvalidBoardError

__all__ = [
    "BoardError",
    "BoardLoadError",
    "InvalidBoardError",
    "load_board",
    "parse_board",
]
