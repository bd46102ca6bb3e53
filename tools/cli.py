"""
chord-maker command line.

Usage:
    chord-maker notes_in_key Db
    chord-maker notes_in_chord Cmin v
    chord-maker major_keys
    chord-maker minor_keys

    python -m tools.cli notes_in_chord C vi

Exit codes
----------
    0  — success
    2  — invalid key name, degree, or other theory error
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from core.config import AppConfig
from core.theory.chords import notes_in_chord
from core.theory.errors import TheoryError
from core.theory.keys import all_major_keys, all_minor_keys, notes_in_key

logger = logging.getLogger(__name__)


def format_chord(key_name: str, degree: str) -> str:
    """Render a chord line, e.g. 'C (vi): A minor: A C E'."""
    chord = notes_in_chord(key_name, degree)
    notes = " ".join(chord.notes)
    return f"{key_name} ({chord.roman}): {chord.root} {chord.quality.value}: {notes}"


def _cmd_notes_in_key(args: argparse.Namespace) -> list[str]:
    return [" ".join(notes_in_key(args.key_name))]


def _cmd_notes_in_chord(args: argparse.Namespace) -> list[str]:
    return [format_chord(args.key_name, args.chord_number)]


def _cmd_major_keys(args: argparse.Namespace) -> list[str]:
    return [f"{root}: {' '.join(notes)}" for root, notes in all_major_keys().items()]


def _cmd_minor_keys(args: argparse.Namespace) -> list[str]:
    return [f"{root} minor: {' '.join(notes)}" for root, notes in all_minor_keys().items()]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chord-maker",
        description="Spell key signatures and diatonic triads",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output (key resolution, enharmonic respelling)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    key_p = sub.add_parser("notes_in_key", help="print the notes for the given key")
    key_p.add_argument("key_name", metavar="KEY_NAME", help="e.g. C, Db, Ebmin")
    key_p.set_defaults(handler=_cmd_notes_in_key)

    chord_p = sub.add_parser(
        "notes_in_chord",
        help="print the notes in the chord number for a given key",
    )
    chord_p.add_argument("key_name", metavar="KEY_NAME", help="e.g. C, Db, Ebmin")
    chord_p.add_argument("chord_number", metavar="CHORD_NUMBER", help="1-7 or i-vii")
    chord_p.set_defaults(handler=_cmd_notes_in_chord)

    major_p = sub.add_parser("major_keys", help="print notes for all major keys")
    major_p.set_defaults(handler=_cmd_major_keys)

    minor_p = sub.add_parser("minor_keys", help="print notes for all minor keys")
    minor_p.set_defaults(handler=_cmd_minor_keys)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    config = AppConfig.from_env()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        lines = args.handler(args)
    except TheoryError as exc:
        logger.debug("%s rejected %r", exc.kind, exc.value)
        print(f"error: {exc.message}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
