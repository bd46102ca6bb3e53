"""
api/schemas/tools.py — Pydantic schemas for the /tools endpoints.

Covers:
    GET  /tools         — list[ToolSpec]
    POST /tools/{name}  — ToolOutput (200) or TheoryErrorResponse (404/422)
"""

from typing import Any

from pydantic import BaseModel, Field


class ToolParameterSpec(BaseModel):
    """One parameter as reported by TheoryTool.to_dict()."""

    name: str
    type: str = Field(..., description="Accepted type name(s), e.g. 'str | int'")
    description: str
    required: bool
    default: Any = None


class ToolSpec(BaseModel):
    """A registered tool and its parameters, in call order."""

    name: str
    description: str
    parameters: list[ToolParameterSpec]


class ToolOutput(BaseModel):
    """Successful tool run."""

    tool: str
    data: Any
