"""Exceptions raised by byline sessions."""


class BylineError(Exception):
    """Base exception for byline operations."""


class EndOfInput(BylineError):
    """Raised when the terminal signals end of input (Ctrl+D / Ctrl+C)."""


__all__ = ["BylineError", "EndOfInput"]
