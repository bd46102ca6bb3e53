"""
Tests for core/theory/roman.py — Roman numerals and degree parsing.

Validates:
    - roman_to_int: standard numerals, case-insensitivity, permissive input
    - parse_degree: digits, numerals, ints, range checks
    - roman_label: major / minor labels
"""

import pytest

from core.theory.errors import InvalidDegree
from core.theory.roman import ROMAN_NUMERALS, parse_degree, roman_label, roman_to_int
from core.theory.types import Mode

# ---------------------------------------------------------------------------
# roman_to_int
# ---------------------------------------------------------------------------


class TestRomanToInt:
    @pytest.mark.parametrize(
        ("roman", "expected"),
        [("i", 1), ("ii", 2), ("iii", 3), ("iv", 4), ("v", 5), ("vi", 6), ("vii", 7)],
    )
    def test_scale_degrees(self, roman, expected):
        assert roman_to_int(roman) == expected

    def test_case_insensitive(self):
        assert roman_to_int("VII") == 7
        assert roman_to_int("Iv") == 4

    def test_larger_numerals(self):
        assert roman_to_int("ix") == 9
        assert roman_to_int("xiv") == 14
        assert roman_to_int("mcmxc") == 1990

    def test_permissive_non_canonical(self):
        # Malformed numerals are computed, not rejected
        assert roman_to_int("iiii") == 4
        assert roman_to_int("iiv") == 3

    def test_empty_is_zero(self):
        assert roman_to_int("") == 0

    def test_unknown_character_raises(self):
        with pytest.raises(InvalidDegree) as exc_info:
            roman_to_int("viz")
        assert exc_info.value.value == "viz"


# ---------------------------------------------------------------------------
# parse_degree
# ---------------------------------------------------------------------------


class TestParseDegree:
    def test_digit_strings(self):
        for n in range(1, 8):
            assert parse_degree(str(n)) == n

    def test_roman_strings(self):
        assert parse_degree("v") == 5
        assert parse_degree("VI") == 6

    def test_ints(self):
        assert parse_degree(3) == 3

    def test_whitespace_stripped(self):
        assert parse_degree(" 4 ") == 4

    @pytest.mark.parametrize("degree", ["0", "8", "viii", "x", 0, 8, -1, "", "-1", "abc"])
    def test_out_of_range_or_garbage_raises(self, degree):
        with pytest.raises(InvalidDegree):
            parse_degree(degree)

    def test_bool_rejected(self):
        with pytest.raises(InvalidDegree):
            parse_degree(True)


# ---------------------------------------------------------------------------
# roman_label
# ---------------------------------------------------------------------------


class TestRomanLabel:
    def test_major_labels(self):
        labels = [roman_label(d, Mode.MAJOR) for d in range(1, 8)]
        assert labels == ["I", "ii", "iii", "IV", "V", "vi", "vii"]

    def test_minor_labels(self):
        labels = [roman_label(d, Mode.MINOR) for d in range(1, 8)]
        assert labels == ["i", "ii", "III", "iv", "v", "VI", "VII"]

    def test_labels_parse_back_to_degree(self):
        for mode in Mode:
            for degree, label in enumerate(ROMAN_NUMERALS[mode], start=1):
                assert roman_to_int(label) == degree

    def test_out_of_range_raises(self):
        with pytest.raises(InvalidDegree):
            roman_label(0, Mode.MAJOR)
