"""
api/routes/tools.py — Run the registered theory tools over HTTP.

Endpoints:
    GET  /tools          — Every registered tool with its parameters
    POST /tools/{name}   — Run one tool; the JSON body is its keyword params

A tool that reports failure is turned into the same error body the
/keys and /chords routes use: 422 with ``error_kind``, ``value`` and
``message``. An unregistered tool name is a 404 with kind UnknownTool.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from api.errors import reject
from api.schemas.theory import TheoryErrorResponse
from api.schemas.tools import ToolOutput, ToolSpec
from tools.base import INVALID_PARAMETER
from tools.registry import UnknownTool, get_registry

router = APIRouter(prefix="/tools", tags=["tools"])

_ERROR_RESPONSES = {
    404: {"model": TheoryErrorResponse},
    422: {"model": TheoryErrorResponse},
}


@router.get("", response_model=list[ToolSpec])
def list_tools() -> list[ToolSpec]:
    """Return every registered tool with its parameter list."""
    return [ToolSpec.model_validate(spec) for spec in get_registry().list_tools()]


@router.post("/{name}", response_model=ToolOutput, responses=_ERROR_RESPONSES)
def run_tool(name: str, params: dict[str, Any] | None = Body(default=None)) -> ToolOutput:
    """Run a tool by name.

    Example:
        POST /tools/notes_in_chord  {"key_name": "G", "degree": 5}

    Raises:
        404: No tool registered under ``name``.
        422: Missing or mistyped parameter, or a theory error.
    """
    try:
        result = get_registry().call(name, **(params or {}))
    except UnknownTool as exc:
        reject("UnknownTool", str(exc), exc.name, status_code=404)

    if not result.success:
        metadata = result.metadata or {}
        reject(
            metadata.get("error_kind", INVALID_PARAMETER),
            result.error or "Tool failed",
            metadata.get("value"),
        )

    return ToolOutput(tool=name, data=result.data)
