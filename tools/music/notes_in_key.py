"""
notes_in_key tool — spell the seven notes of a major or minor key.

Pure computation: no I/O. Wraps core.theory.notes_in_key.
"""

from typing import Any

from core.theory.keys import key_notes, resolve_key
from tools.base import TheoryTool, ToolParameter, ToolResult


class NotesInKey(TheoryTool):
    """Return the notes of a key such as "Db" or "Ebmin", tonic first."""

    @property
    def name(self) -> str:
        return "notes_in_key"

    @property
    def description(self) -> str:
        return (
            "Spell the seven notes of a major or minor key. "
            "Key names are a letter A-G, an optional 'b' or '#', and an "
            "optional 'maj' or 'min' suffix, e.g. 'C', 'Db', 'Ebmin'."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="key_name",
                type=str,
                description="Key name, e.g. 'C', 'Ab', 'Ebmin'.",
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        key_name: str = kwargs["key_name"]
        key = resolve_key(key_name)
        notes = key_notes(key)
        return ToolResult(
            success=True,
            data={
                "key": key_name,
                "root": key.root,
                "mode": key.mode.value,
                "notes": list(notes),
            },
            metadata={"label": key.label},
        )
