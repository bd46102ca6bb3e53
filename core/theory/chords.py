"""
core/theory/chords.py — Diatonic triad building and quality classification.

Exports:
    CHORD_QUALITIES    (third − root, fifth − third) → ChordQuality
    chord_notes(notes, degree) → (root, third, fifth)
    classify_intervals(root, third, fifth) → ChordQuality
    classify_chord(notes) → ChordQuality
    notes_in_chord(key_name, degree) → Chord
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from core.theory.errors import InvalidChordShape, InvalidDegree, NoteOutOfRange
from core.theory.keys import key_notes, resolve_key
from core.theory.pitch import note_number_from_name
from core.theory.roman import MAX_DEGREE, MIN_DEGREE, parse_degree, roman_label
from core.theory.types import Chord, ChordQuality

SCALE_LENGTH = 7

CHORD_QUALITIES: MappingProxyType[tuple[int, int], ChordQuality] = MappingProxyType(
    {
        (4, 3): ChordQuality.MAJOR,
        (3, 4): ChordQuality.MINOR,
        (3, 3): ChordQuality.DIMINISHED,
    }
)


# ---------------------------------------------------------------------------
# Chord Builder
# ---------------------------------------------------------------------------


def chord_notes(notes: Sequence[str], degree: int) -> tuple[str, str, str]:
    """Pick the root, third and fifth for a scale degree.

    The third sits two scale steps above the root and the fifth four,
    wrapping around the seven notes of the key.

    Args:
        notes:  The seven notes of a key, tonic first
        degree: 1-based scale degree

    Raises:
        InvalidDegree:  If degree is outside [1, 7]
        NoteOutOfRange: If notes does not hold exactly seven entries

    Examples:
        >>> chord_notes(("C", "D", "E", "F", "G", "A", "B"), 7)
        ('B', 'D', 'F')
    """
    if not (MIN_DEGREE <= degree <= MAX_DEGREE):
        raise InvalidDegree(f"Chord degree must be in [1, 7], got {degree}", degree)
    if len(notes) != SCALE_LENGTH:
        raise NoteOutOfRange(
            f"A key must have {SCALE_LENGTH} notes to build chords, got {len(notes)}",
            tuple(notes),
        )
    root = degree - 1
    return (
        notes[root],
        notes[(root + 2) % SCALE_LENGTH],
        notes[(root + 4) % SCALE_LENGTH],
    )


# ---------------------------------------------------------------------------
# Chord Classifier
# ---------------------------------------------------------------------------


def classify_intervals(root: int, third: int, fifth: int) -> ChordQuality:
    """Classify a triad from chromatic numbers.

    Numbers are reduced mod 12, then the third and fifth are lifted by an
    octave where needed so the triad reads upward from the root.
    """
    root, third, fifth = root % 12, third % 12, fifth % 12
    if third < root:
        third += 12
        fifth += 12
    if fifth < third:
        fifth += 12
    return CHORD_QUALITIES.get((third - root, fifth - third), ChordQuality.UNKNOWN)


def classify_chord(notes: Sequence[str]) -> ChordQuality:
    """Classify a spelled triad (root, third, fifth).

    Raises:
        InvalidChordShape: If notes does not hold exactly three names
        InvalidPitch:      If a name cannot be resolved

    Examples:
        >>> classify_chord(("A", "C", "E"))
        <ChordQuality.MINOR: 'minor'>
    """
    if len(notes) != 3:
        raise InvalidChordShape(
            f"Chord intervals must have three elements, got {len(notes)}", tuple(notes)
        )
    root, third, fifth = (note_number_from_name(note) for note in notes)
    return classify_intervals(root, third, fifth)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def notes_in_chord(key_name: str, degree: str | int) -> Chord:
    """Build and classify the triad on a degree of a key.

    Args:
        key_name: Key name, e.g. "C", "Ebmin"
        degree:   Digit string, Roman numeral string or int, e.g. "6", "vi", 6

    Returns:
        Chord with its notes, quality and Roman numeral label

    Examples:
        >>> chord = notes_in_chord("C", "vi")
        >>> chord.notes, chord.quality.value
        (('A', 'C', 'E'), 'minor')
    """
    number = parse_degree(degree)
    key = resolve_key(key_name)
    root, third, fifth = chord_notes(key_notes(key), number)
    return Chord(
        degree=number,
        root=root,
        third=third,
        fifth=fifth,
        quality=classify_chord((root, third, fifth)),
        roman=roman_label(number, key.mode),
    )
