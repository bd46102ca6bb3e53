"""
core/theory/keys.py — Key-name resolution and key-note spelling.

Exports:
    MAJOR_INTERVALS / MINOR_INTERVALS   cumulative semitone patterns
    resolve_key(key_name) → Key
    key_notes(key) → tuple[str, ...]
    notes_in_key(key_name) → tuple[str, ...]
    all_major_keys() / all_minor_keys() → dict[str, tuple[str, ...]]
    are_sequential(note_1, note_2) → bool
    correct_sequence(note) → str
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from core.theory.errors import InvalidKeyName, InvalidRoot, UnknownKeyType
from core.theory.pitch import (
    ACCIDENTALS,
    FLAT,
    NATURAL_NOTES,
    SEMITONES,
    SHARP,
    is_flat,
    letter_index,
    note_name_from_number,
    split_note,
)
from core.theory.types import Key, Mode

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Interval patterns (semitones above the root for degrees 2–7, then octave)
# ---------------------------------------------------------------------------

MAJOR_INTERVALS: tuple[int, ...] = (2, 4, 5, 7, 9, 11, 12)
MINOR_INTERVALS: tuple[int, ...] = (2, 3, 5, 7, 8, 10, 12)

INTERVALS: MappingProxyType[Mode, tuple[int, ...]] = MappingProxyType(
    {Mode.MAJOR: MAJOR_INTERVALS, Mode.MINOR: MINOR_INTERVALS}
)

# Mode suffixes accepted after the root; "" means no suffix
MODE_SUFFIXES: MappingProxyType[str, Mode] = MappingProxyType(
    {"": Mode.MAJOR, "maj": Mode.MAJOR, "min": Mode.MINOR}
)


# ---------------------------------------------------------------------------
# Key Resolver
# ---------------------------------------------------------------------------


def resolve_key(key_name: str) -> Key:
    """Parse a key name such as "C", "Ebmin" or "Gmaj" into a Key.

    The name is read as: one letter A–G, an optional accidental ("b" or
    "#"), then an optional mode suffix ("maj" or "min"; absent means major).

    Raises:
        InvalidKeyName: If the name does not start with a letter A–G
        UnknownKeyType: If the suffix is neither "maj" nor "min"
        InvalidRoot:    If the root spelling is not in SEMITONES

    Examples:
        >>> resolve_key("Cmin")
        Key(root='C', mode=<Mode.MINOR: 'minor'>, intervals=(2, 3, 5, 7, 8, 10, 12))
    """
    if not isinstance(key_name, str) or not key_name or key_name[0] not in NATURAL_NOTES:
        raise InvalidKeyName(f"Invalid key name {key_name!r}", key_name)

    letter, rest = key_name[0], key_name[1:]
    accidental = ""
    if rest[:1] in ACCIDENTALS:
        accidental, rest = rest[:1], rest[1:]

    mode = MODE_SUFFIXES.get(rest)
    if mode is None:
        raise UnknownKeyType(f"Unknown key type {rest!r}", key_name)

    root = letter + accidental
    if root not in SEMITONES:
        raise InvalidRoot(f"Root note {root!r} is invalid", root)

    key = Key(root=root, mode=mode, intervals=INTERVALS[mode])
    logger.debug("Resolved %r as %s", key_name, key.label)
    return key


# ---------------------------------------------------------------------------
# Spelling correction
# ---------------------------------------------------------------------------


def are_sequential(note_1: str, note_2: str) -> bool:
    """True if note_2's letter is exactly one step after note_1's (G → A wraps)."""
    return (letter_index(note_2) - letter_index(note_1)) % len(NATURAL_NOTES) == 1


def correct_sequence(note: str) -> str:
    """Respell a note on the neighbouring letter.

    A flat moves down a letter and becomes sharp ("Db" → "C#"); a natural
    or sharp moves up a letter and becomes flat ("B" → "Cb").
    """
    letter, _ = split_note(note)
    idx = NATURAL_NOTES.index(letter)
    if is_flat(note):
        return NATURAL_NOTES[(idx - 1) % len(NATURAL_NOTES)] + SHARP
    return NATURAL_NOTES[(idx + 1) % len(NATURAL_NOTES)] + FLAT


def _spell_sequentially(raw: tuple[str, ...]) -> tuple[str, ...]:
    spelled: list[str] = []
    for name in raw:
        if spelled and not are_sequential(spelled[-1], name):
            corrected = correct_sequence(name)
            logger.debug("Respelled %s as %s after %s", name, corrected, spelled[-1])
            name = corrected
        spelled.append(name)
    return tuple(spelled)


# ---------------------------------------------------------------------------
# Key Note Generator
# ---------------------------------------------------------------------------


def key_notes(key: Key) -> tuple[str, ...]:
    """Return the seven spelled notes of a key, tonic first.

    The octave entry of the interval pattern supplies degree 1, so the
    pattern is rotated to put it first before spelling.

    Examples:
        >>> key_notes(resolve_key("D"))
        ('D', 'E', 'F#', 'G', 'A', 'B', 'C#')
    """
    if key.root not in SEMITONES:
        raise InvalidRoot(f"Root note {key.root!r} is invalid", key.root)
    root_index = SEMITONES.index(key.root)
    offsets = key.intervals[-1:] + key.intervals[:-1]
    raw = tuple(note_name_from_number(root_index + offset) for offset in offsets)
    return _spell_sequentially(raw)


def notes_in_key(key_name: str) -> tuple[str, ...]:
    """Resolve a key name and return its seven notes."""
    return key_notes(resolve_key(key_name))


def _all_keys(mode: Mode) -> dict[str, tuple[str, ...]]:
    return {
        root: key_notes(Key(root=root, mode=mode, intervals=INTERVALS[mode]))
        for root in SEMITONES
    }


def all_major_keys() -> dict[str, tuple[str, ...]]:
    """Notes for the major key on each of the 12 chromatic roots."""
    return _all_keys(Mode.MAJOR)


def all_minor_keys() -> dict[str, tuple[str, ...]]:
    """Notes for the minor key on each of the 12 chromatic roots."""
    return _all_keys(Mode.MINOR)
