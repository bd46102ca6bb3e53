"""
core/theory/errors.py — Typed error kinds for the theory engine.

Every error is a ValueError subclass so callers that only care about
"bad input" can catch ValueError, while surfaces (CLI, API, tools) can
report the specific kind and the offending value.
"""

from __future__ import annotations

from typing import Any


class TheoryError(ValueError):
    """Base class for all input-validation failures in core/theory.

    Attributes:
        value:   The offending input (key name, note, degree, ...)
        message: Human-readable explanation
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    @property
    def kind(self) -> str:
        """Error kind name, e.g. 'InvalidKeyName'."""
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"error_kind": self.kind, "value": self.value, "message": self.message}


class InvalidKeyName(TheoryError):
    """Key name does not start with a note letter A–G."""


class InvalidRoot(TheoryError):
    """Key root spelling is not in the chromatic table."""


class UnknownKeyType(TheoryError):
    """Key name carries a mode suffix other than 'maj' or 'min'."""


class InvalidDegree(TheoryError):
    """Chord degree is not a number or Roman numeral in 1–7."""


class InvalidChordShape(TheoryError):
    """Chord does not have exactly three notes."""


class InvalidPitch(TheoryError):
    """Note name or chromatic number cannot be resolved."""


class NoteOutOfRange(TheoryError):
    """Scale position falls outside the key's seven notes."""
