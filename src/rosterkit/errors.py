"""Exception types raised by the roster core."""

from __future__ import annotations

from typing import Sequence


class RosterError(Exception):
    """Base class for roster failures that are not plain filesystem errors."""


class DecodeError(RosterError, ValueError):
    """Raised when roster content cannot be mapped onto player records."""

    def __init__(self, message: str, *, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class RecordNotFoundError(RosterError, KeyError):
    """Raised by strict updates when no record carries the requested barcode."""

    def __init__(self, barcode: str):
        super().__init__(barcode)
        self.barcode = barcode

    def __str__(self) -> str:
        return f"No player with barcode {self.barcode!r}"


class SyncToolError(RosterError, RuntimeError):
    """Non-zero exit from the version control client.

    The message is the tool's own diagnostic text so callers can surface it
    verbatim.
    """

    def __init__(self, message: str, *, argv: Sequence[str] = (), returncode: int | None = None):
        super().__init__(message)
        self.argv = tuple(argv)
        self.returncode = returncode
        self.stderr = message


class PreconditionError(RosterError, RuntimeError):
    """Raised when a sync operation is attempted in an unusable state."""


__all__ = [
    "DecodeError",
    "PreconditionError",
    "RecordNotFoundError",
    "RosterError",
    "SyncToolError",
]
