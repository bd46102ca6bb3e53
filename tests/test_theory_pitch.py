"""
Tests for core/theory/pitch.py — chromatic and letter tables.

Validates:
    - SEMITONES / NATURAL_NOTES contents
    - note_name_from_number: mod-12 reduction, type checking
    - note_number_from_name: canonical flats, sharps, non-canonical flats
    - split_note / is_flat / letter_index
"""

import pytest

from core.theory.errors import InvalidPitch, TheoryError
from core.theory.pitch import (
    NATURAL_NOTES,
    SEMITONES,
    is_flat,
    letter_index,
    note_name_from_number,
    note_number_from_name,
    split_note,
)

# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class TestTables:
    def test_twelve_semitones(self):
        assert len(SEMITONES) == 12
        assert SEMITONES[0] == "C"
        assert SEMITONES[1] == "Db"
        assert SEMITONES[11] == "B"

    def test_semitones_use_flats(self):
        assert not any("#" in name for name in SEMITONES)

    def test_seven_natural_letters(self):
        assert NATURAL_NOTES == ("A", "B", "C", "D", "E", "F", "G")


# ---------------------------------------------------------------------------
# note_name_from_number
# ---------------------------------------------------------------------------


class TestNoteNameFromNumber:
    def test_in_range(self):
        for idx, name in enumerate(SEMITONES):
            assert note_name_from_number(idx) == name

    def test_reduces_above_octave(self):
        assert note_name_from_number(12) == "C"
        assert note_name_from_number(13) == "Db"
        assert note_name_from_number(23) == "B"

    def test_reduces_negative(self):
        assert note_name_from_number(-1) == "B"
        assert note_name_from_number(-12) == "C"

    def test_non_integer_raises(self):
        with pytest.raises(InvalidPitch):
            note_name_from_number(1.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidPitch):
            note_name_from_number("C")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# note_number_from_name
# ---------------------------------------------------------------------------


class TestNoteNumberFromName:
    def test_canonical_names(self):
        assert note_number_from_name("C") == 0
        assert note_number_from_name("Eb") == 3
        assert note_number_from_name("B") == 11

    def test_sharp_shifts_base_letter_up(self):
        assert note_number_from_name("C#") == 1
        assert note_number_from_name("F#") == 6
        assert note_number_from_name("E#") == 5

    def test_b_sharp_wraps_to_c(self):
        assert note_number_from_name("B#") == 0

    def test_non_canonical_flat_shifts_down(self):
        assert note_number_from_name("Cb") == 11
        assert note_number_from_name("Fb") == 4

    def test_round_trip_over_table(self):
        for idx in range(12):
            assert note_number_from_name(note_name_from_number(idx)) == idx

    @pytest.mark.parametrize("name", ["H", "", "c", "C##", "Cx", "Bbb"])
    def test_unknown_name_raises(self, name):
        with pytest.raises(InvalidPitch) as exc_info:
            note_number_from_name(name)
        assert exc_info.value.value == name

    def test_invalid_pitch_is_value_error(self):
        with pytest.raises(ValueError):
            note_number_from_name("H")
        assert issubclass(InvalidPitch, TheoryError)


# ---------------------------------------------------------------------------
# Spelling helpers
# ---------------------------------------------------------------------------


class TestSpellingHelpers:
    def test_split_note(self):
        assert split_note("C") == ("C", "")
        assert split_note("Eb") == ("E", "b")
        assert split_note("F#") == ("F", "#")

    def test_is_flat(self):
        assert is_flat("Bb")
        assert not is_flat("B")
        assert not is_flat("G#")

    def test_letter_index(self):
        assert letter_index("A") == 0
        assert letter_index("C#") == 2
        assert letter_index("Gb") == 6
