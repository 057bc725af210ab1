"""Error hierarchy for cssvg."""

from __future__ import annotations


class CssvgError(Exception):
    """Base error for all cssvg errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DecodeError(CssvgError):
    """Raised when text is not well-formed percent-encoding."""


class OptimizeError(CssvgError):
    """Raised when the SVG optimizer reports a failure."""


class ParseError(CssvgError):
    """Raised when a CSS value cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
