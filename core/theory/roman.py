"""
core/theory/roman.py — Roman numeral and scale-degree parsing.

The Roman numeral conversion is deliberately permissive: it applies the
subtractive rule digit by digit without checking that the numeral is
well formed, so "iiii" is 4 and "iiv" is 3.
"""

from __future__ import annotations

from types import MappingProxyType

from core.theory.errors import InvalidDegree
from core.theory.types import Mode

ROMAN_TO_INT: MappingProxyType[str, int] = MappingProxyType(
    {
        "i": 1,
        "v": 5,
        "x": 10,
        "l": 50,
        "c": 100,
        "d": 500,
        "m": 1000,
    }
)

ROMAN_NUMERALS: MappingProxyType[Mode, tuple[str, ...]] = MappingProxyType(
    {
        Mode.MAJOR: ("I", "ii", "iii", "IV", "V", "vi", "vii"),
        Mode.MINOR: ("i", "ii", "III", "iv", "v", "VI", "VII"),
    }
)

MIN_DEGREE = 1
MAX_DEGREE = 7


def roman_to_int(roman: str) -> int:
    """Convert a Roman numeral to an integer.

    Digits are scanned right to left. A digit smaller than the largest
    digit seen so far is subtracted; otherwise it is added and becomes
    the new largest.

    Args:
        roman: Case-insensitive numeral, e.g. "vii", "IV"

    Returns:
        Integer value (0 for an empty string)

    Raises:
        InvalidDegree: If a character is not a Roman digit
    """
    total = 0
    largest = 1
    for char in reversed(roman.lower()):
        value = ROMAN_TO_INT.get(char)
        if value is None:
            raise InvalidDegree(f"Invalid Roman numeral {roman!r}", roman)
        if value >= largest:
            total += value
            largest = value
        else:
            total -= value
    return total


def parse_degree(degree: str | int) -> int:
    """Parse a chord degree given as a digit string, Roman numeral or int.

    A digit string with a non-zero value is read as base 10; any other
    string (including "0") is read as a Roman numeral.

    Returns:
        Degree in [1, 7]

    Raises:
        InvalidDegree: If the token cannot be parsed or is out of range
    """
    if isinstance(degree, bool):
        raise InvalidDegree(f"Invalid chord degree {degree!r}", degree)
    if isinstance(degree, int):
        number = degree
    else:
        token = str(degree).strip()
        if token.isdecimal() and int(token) != 0:
            number = int(token)
        else:
            number = roman_to_int(token)

    if not (MIN_DEGREE <= number <= MAX_DEGREE):
        raise InvalidDegree(
            f"Chord numbers must be between i ({MIN_DEGREE}) and vii ({MAX_DEGREE}), got {degree!r}",
            degree,
        )
    return number


def roman_label(degree: int, mode: Mode) -> str:
    """Return the display numeral for a degree, e.g. (6, MAJOR) → 'vi'."""
    if not (MIN_DEGREE <= degree <= MAX_DEGREE):
        raise InvalidDegree(f"Chord degree must be in [1, 7], got {degree}", degree)
    return ROMAN_NUMERALS[mode][degree - 1]
