"""Custom exceptions for board loading and validation."""
from __future__ import annotations


class BoardError(Exception):
    """Base exception for the data layer."""


class BoardLoadError(BoardError):
    """Raised when a board file is missing or unreadable."""


class InvalidBoardError(BoardError):
    """Raised when board text fails structural validation."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        location = ""
        if line is not None:
            location = f" (line {line}" + (f", column {column})" if column is not None else ")")
        super().__init__(f"{message}{location}")
        self.line = line
        self.column = column
