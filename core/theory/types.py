"""
core/theory/types.py — Frozen value objects for the key/chord engine.

All types are immutable — safe to hash, cache, and use as dict keys.
No I/O, no side effects, no external dependencies beyond stdlib.

Types:
    Mode          — major / minor
    ChordQuality  — major / minor / diminished / unknown
    Key           — a root spelling + mode + cumulative interval pattern
    Chord         — a triad at a scale degree, with its quality
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.theory.errors import InvalidDegree, InvalidRoot, NoteOutOfRange

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Mode(str, Enum):
    """Key type. Only major and minor keys are supported."""

    MAJOR = "major"
    MINOR = "minor"


class ChordQuality(str, Enum):
    """Triad quality inferred from the stacked thirds."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------------------
# Key
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Key:
    """A resolved key: root spelling, mode and interval pattern.

    Attributes:
        root:      Canonical root spelling, e.g. "C", "Db"
        mode:      Mode.MAJOR or Mode.MINOR
        intervals: Cumulative semitone offsets from the root for degrees
                   2–7 followed by the octave, e.g. (2, 4, 5, 7, 9, 11, 12)
    """

    root: str
    mode: Mode
    intervals: tuple[int, ...]

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'Eb minor'."""
        return f"{self.root} {self.mode.value}"

    def __post_init__(self) -> None:
        if not self.root:
            raise InvalidRoot("Key.root must not be empty", self.root)
        if len(self.intervals) != 7:
            raise ValueError(f"Key.intervals must have 7 entries, got {len(self.intervals)}")
        if any(b <= a for a, b in zip(self.intervals, self.intervals[1:])):
            raise ValueError(f"Key.intervals must be strictly increasing, got {self.intervals}")
        if self.intervals[-1] != 12:
            raise ValueError(f"Key.intervals must end at the octave (12), got {self.intervals}")


# ---------------------------------------------------------------------------
# Chord
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Chord:
    """A diatonic triad built on a scale degree.

    Attributes:
        degree:  1-based scale degree (1 = tonic, 7 = leading/sub-tonic)
        root:    Root note name, e.g. "A"
        third:   Third note name, e.g. "C"
        fifth:   Fifth note name, e.g. "E"
        quality: ChordQuality inferred from the intervals
        roman:   Roman numeral label for the degree, e.g. "vi"
    """

    degree: int
    root: str
    third: str
    fifth: str
    quality: ChordQuality
    roman: str = ""

    @property
    def notes(self) -> tuple[str, str, str]:
        """The triad as (root, third, fifth)."""
        return (self.root, self.third, self.fifth)

    def __post_init__(self) -> None:
        if not (1 <= self.degree <= 7):
            raise InvalidDegree(f"Chord.degree must be in [1, 7], got {self.degree}", self.degree)
        for note in self.notes:
            if not note:
                raise NoteOutOfRange("Chord notes must not be empty", note)
