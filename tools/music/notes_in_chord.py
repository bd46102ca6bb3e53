"""
notes_in_chord tool — build and classify the triad on a scale degree.

Degrees may be digits ("6") or Roman numerals ("vi", "VI").
"""

from typing import Any

from core.theory.chords import notes_in_chord
from tools.base import TheoryTool, ToolParameter, ToolResult


class NotesInChord(TheoryTool):
    """Return the root, third, fifth and quality of a diatonic triad."""

    @property
    def name(self) -> str:
        return "notes_in_chord"

    @property
    def description(self) -> str:
        return (
            "Build the triad on a scale degree of a major or minor key and "
            "classify it as major, minor or diminished. The degree is 1-7 "
            "as a digit or a Roman numeral (i-vii)."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="key_name",
                type=str,
                description="Key name, e.g. 'C', 'Ab', 'Dmin'.",
            ),
            ToolParameter(
                name="degree",
                type=(str, int),
                description=(
                    "Scale degree 1-7 as a digit, Roman numeral or int, e.g. '5', 'v' or 5."
                ),
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        key_name: str = kwargs["key_name"]
        chord = notes_in_chord(key_name, kwargs["degree"])
        return ToolResult(
            success=True,
            data={
                "key": key_name,
                "degree": chord.degree,
                "roman": chord.roman,
                "root": chord.root,
                "third": chord.third,
                "fifth": chord.fifth,
                "notes": list(chord.notes),
                "quality": chord.quality.value,
            },
        )
