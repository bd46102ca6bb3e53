"""
core/theory/ — Pure key-signature and triad engine.

Exports:
    Types:   Key, Chord, Mode, ChordQuality
    Errors:  TheoryError and its kinds
    Pitch:   SEMITONES, NATURAL_NOTES, note_name_from_number, note_number_from_name
    Roman:   roman_to_int, parse_degree, roman_label
    Keys:    resolve_key, key_notes, notes_in_key, all_major_keys, all_minor_keys
    Chords:  chord_notes, classify_chord, classify_intervals, notes_in_chord
"""

from core.theory.chords import chord_notes, classify_chord, classify_intervals, notes_in_chord
from core.theory.errors import (
    InvalidChordShape,
    InvalidDegree,
    InvalidKeyName,
    InvalidPitch,
    InvalidRoot,
    NoteOutOfRange,
    TheoryError,
    UnknownKeyType,
)
from core.theory.keys import all_major_keys, all_minor_keys, key_notes, notes_in_key, resolve_key
from core.theory.pitch import (
    NATURAL_NOTES,
    SEMITONES,
    note_name_from_number,
    note_number_from_name,
)
from core.theory.roman import parse_degree, roman_label, roman_to_int
from core.theory.types import Chord, ChordQuality, Key, Mode

__all__ = [
    # Types
    "Key",
    "Chord",
    "Mode",
    "ChordQuality",
    # Errors
    "TheoryError",
    "InvalidKeyName",
    "InvalidRoot",
    "UnknownKeyType",
    "InvalidDegree",
    "InvalidChordShape",
    "InvalidPitch",
    "NoteOutOfRange",
    # Pitch
    "SEMITONES",
    "NATURAL_NOTES",
    "note_name_from_number",
    "note_number_from_name",
    # Roman
    "roman_to_int",
    "parse_degree",
    "roman_label",
    # Keys
    "resolve_key",
    "key_notes",
    "notes_in_key",
    "all_major_keys",
    "all_minor_keys",
    # Chords
    "chord_notes",
    "classify_chord",
    "classify_intervals",
    "notes_in_chord",
]
