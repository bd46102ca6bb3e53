"""
core/theory/pitch.py — Chromatic and natural-letter pitch tables.

Exports:
    SEMITONES          12-element tuple of canonical spellings (flats)
    NATURAL_NOTES      7-element tuple of natural letters A–G
    ACCIDENTALS        recognised accidental markers ("b", "#")

    split_note(name) → (letter, accidental)
    is_flat(name) → bool
    letter_index(name) → int
    note_name_from_number(number) → str
    note_number_from_name(name) → int
"""

from __future__ import annotations

from core.theory.errors import InvalidPitch

# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

SEMITONES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

NATURAL_NOTES: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")

FLAT = "b"
SHARP = "#"
ACCIDENTALS: tuple[str, ...] = (FLAT, SHARP)


# ---------------------------------------------------------------------------
# Spelling helpers
# ---------------------------------------------------------------------------


def split_note(name: str) -> tuple[str, str]:
    """Split a note name into its letter and accidental.

    Args:
        name: Note name, e.g. "C", "Eb", "F#"

    Returns:
        (letter, accidental) where accidental is "", "b" or "#"

    Raises:
        InvalidPitch: If name is not one letter A–G plus at most one accidental
    """
    if not isinstance(name, str) or not name or name[0] not in NATURAL_NOTES:
        raise InvalidPitch(f"No note with name {name!r}", name)
    accidental = name[1:]
    if accidental and accidental not in ACCIDENTALS:
        raise InvalidPitch(f"No note with name {name!r}", name)
    return name[0], accidental


def is_flat(name: str) -> bool:
    return split_note(name)[1] == FLAT


def letter_index(name: str) -> int:
    """Position of the note's letter in NATURAL_NOTES (A=0 … G=6)."""
    return NATURAL_NOTES.index(split_note(name)[0])


# ---------------------------------------------------------------------------
# Number ↔ name
# ---------------------------------------------------------------------------


def note_name_from_number(number: int) -> str:
    """Return the canonical spelling for a chromatic number.

    Any integer is accepted; it is reduced mod 12 first.

    Args:
        number: Chromatic number, e.g. 1, 13, -11

    Returns:
        Canonical spelling, e.g. "Db"

    Raises:
        InvalidPitch: If number is not an integer

    Examples:
        >>> note_name_from_number(13)
        'Db'
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidPitch(f"Note number {number!r} is not an integer", number)
    return SEMITONES[number % 12]


def note_number_from_name(name: str) -> int:
    """Return the chromatic index (0–11) of a spelled note.

    Canonical spellings are looked up directly. A sharp resolves to the
    index of its base letter plus one; a non-canonical flat ("Cb", "Fb")
    resolves to the index of its base letter minus one.

    Raises:
        InvalidPitch: If name is not a valid note name

    Examples:
        >>> note_number_from_name("Eb")
        3
        >>> note_number_from_name("B#")
        0
    """
    letter, accidental = split_note(name)
    if name in SEMITONES:
        return SEMITONES.index(name)
    base = SEMITONES.index(letter)
    if accidental == SHARP:
        return (base + 1) % 12
    return (base - 1) % 12
