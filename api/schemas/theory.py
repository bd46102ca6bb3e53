"""
api/schemas/theory.py — Pydantic response schemas for key and chord endpoints.

Covers:
    /keys/{key_name}               — KeyNotesResponse
    /keys/major, /keys/minor       — KeyListingResponse
    /chords/{key_name}/{degree}    — ChordResponse
    404/422 error body             — TheoryErrorResponse
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class KeyNotesResponse(BaseModel):
    """The seven spelled notes of one key."""

    key: str
    root: str
    mode: str
    notes: list[str] = Field(..., min_length=7, max_length=7)


class KeyListingResponse(BaseModel):
    """Notes for every key of one mode, keyed by root spelling."""

    mode: str
    keys: dict[str, list[str]]

    @field_validator("keys")
    @classmethod
    def twelve_roots(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        if len(v) != 12:
            raise ValueError(f"expected 12 keys, got {len(v)}")
        return v


class ChordResponse(BaseModel):
    """A diatonic triad and its quality."""

    key: str
    degree: int = Field(..., ge=1, le=7)
    roman: str
    root: str
    third: str
    fifth: str
    notes: list[str] = Field(..., min_length=3, max_length=3)
    quality: str


class TheoryErrorDetail(BaseModel):
    """Body of ``detail`` on a 404 or 422 response."""

    error_kind: str
    value: Any = None
    message: str


class TheoryErrorResponse(BaseModel):
    """Error response for a rejected key name, degree, or tool call."""

    detail: TheoryErrorDetail
