"""
major_keys / minor_keys tools — notes for every key on the 12 chromatic roots.
"""

from typing import Any

from core.theory.keys import all_major_keys, all_minor_keys
from core.theory.types import Mode
from tools.base import TheoryTool, ToolParameter, ToolResult


def _listing(mode: Mode, keys: dict[str, tuple[str, ...]]) -> ToolResult:
    return ToolResult(
        success=True,
        data={
            "mode": mode.value,
            "keys": {root: list(notes) for root, notes in keys.items()},
        },
        metadata={"key_count": len(keys)},
    )


class MajorKeys(TheoryTool):
    """List the notes of all twelve major keys."""

    @property
    def name(self) -> str:
        return "major_keys"

    @property
    def description(self) -> str:
        return "List the seven notes of the major key on each of the 12 chromatic roots."

    @property
    def parameters(self) -> list[ToolParameter]:
        return []

    def execute(self, **kwargs: Any) -> ToolResult:
        return _listing(Mode.MAJOR, all_major_keys())


class MinorKeys(TheoryTool):
    """List the notes of all twelve minor keys."""

    @property
    def name(self) -> str:
        return "minor_keys"

    @property
    def description(self) -> str:
        return "List the seven notes of the minor key on each of the 12 chromatic roots."

    @property
    def parameters(self) -> list[ToolParameter]:
        return []

    def execute(self, **kwargs: Any) -> ToolResult:
        return _listing(Mode.MINOR, all_minor_keys())
