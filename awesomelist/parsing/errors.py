"""Errors raised while turning markdown into a catalog."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when markdown cannot be turned into a catalog."""


class EmptyInputError(ParseError):
    """Raised when the markdown is empty or whitespace only."""

    def __init__(self, message: str = "Empty markdown content") -> None:
        super().__init__(message)


class NoSectionsFoundError(ParseError):
    """Raised when extraction finished without producing a single section."""

    def __init__(self, message: str = "No valid sections found in markdown content") -> None:
        super().__init__(message)


__all__ = ["EmptyInputError", "NoSectionsFoundError", "ParseError"]
