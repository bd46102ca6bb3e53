"""
api/routes/theory.py — Key signature and chord endpoints.

Endpoints:
    GET /keys/major                 — Notes for all 12 major keys
    GET /keys/minor                 — Notes for all 12 minor keys
    GET /keys/{key_name}            — Notes for one key, e.g. /keys/Ebmin
    GET /chords/{key_name}/{degree} — Triad on a degree, e.g. /chords/C/vi

Thin HTTP boundary over core/theory. Theory errors become 422 responses
whose detail carries the error kind and the offending value.
"""

from __future__ import annotations

from fastapi import APIRouter

from api.errors import reject_theory_error
from api.schemas.theory import (
    ChordResponse,
    KeyListingResponse,
    KeyNotesResponse,
    TheoryErrorResponse,
)
from core.theory.chords import notes_in_chord
from core.theory.errors import TheoryError
from core.theory.keys import all_major_keys, all_minor_keys, key_notes, resolve_key
from core.theory.types import Mode

router = APIRouter(tags=["theory"])

_ERROR_RESPONSES = {422: {"model": TheoryErrorResponse}}


def _listing(mode: Mode, keys: dict[str, tuple[str, ...]]) -> KeyListingResponse:
    return KeyListingResponse(
        mode=mode.value,
        keys={root: list(notes) for root, notes in keys.items()},
    )


# ---------------------------------------------------------------------------
# GET /keys/...
# ---------------------------------------------------------------------------


@router.get("/keys/major", response_model=KeyListingResponse)
def major_keys() -> KeyListingResponse:
    """Return the notes of the major key on each chromatic root."""
    return _listing(Mode.MAJOR, all_major_keys())


@router.get("/keys/minor", response_model=KeyListingResponse)
def minor_keys() -> KeyListingResponse:
    """Return the notes of the minor key on each chromatic root."""
    return _listing(Mode.MINOR, all_minor_keys())


@router.get("/keys/{key_name}", response_model=KeyNotesResponse, responses=_ERROR_RESPONSES)
def get_key(key_name: str) -> KeyNotesResponse:
    """Return the seven notes of a key.

    Args:
        key_name: e.g. "C", "Db", "Ebmin".

    Raises:
        422: Invalid key name, root, or key type.
    """
    try:
        key = resolve_key(key_name)
        notes = key_notes(key)
    except TheoryError as exc:
        reject_theory_error(exc)

    return KeyNotesResponse(key=key_name, root=key.root, mode=key.mode.value, notes=list(notes))


# ---------------------------------------------------------------------------
# GET /chords/{key_name}/{degree}
# ---------------------------------------------------------------------------


@router.get(
    "/chords/{key_name}/{degree}",
    response_model=ChordResponse,
    responses=_ERROR_RESPONSES,
)
def get_chord(key_name: str, degree: str) -> ChordResponse:
    """Return the triad on a scale degree and its quality.

    Args:
        key_name: e.g. "C", "Ebmin".
        degree:   1-7 as a digit or Roman numeral, e.g. "6" or "vi".

    Raises:
        422: Invalid key name or degree.
    """
    try:
        chord = notes_in_chord(key_name, degree)
    except TheoryError as exc:
        reject_theory_error(exc)

    return ChordResponse(
        key=key_name,
        degree=chord.degree,
        roman=chord.roman,
        root=chord.root,
        third=chord.third,
        fifth=chord.fifth,
        notes=list(chord.notes),
        quality=chord.quality.value,
    )
