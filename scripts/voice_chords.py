#!/usr/bin/env python3
"""
scripts/voice_chords.py: print playable rootless voicings for a progression.

Usage (from project root):
    python scripts/voice_chords.py "Dm7, G7, Cm7"
    python scripts/voice_chords.py --preset "ii-V-I" --json
    python scripts/voice_chords.py --file tune.txt --musicxml out/tune.musicxml
    echo "CM7, A7" | python scripts/voice_chords.py
"""
import argparse
import json
import logging
import os
import sys

_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from jazzvoicing.config import VoicingConfig
from jazzvoicing.constants import LOW_BOUND, HIGH_BOUND, PRESET_PROGRESSIONS
from jazzvoicing.engine import voice_progression
from jazzvoicing.export import write_musicxml
from jazzvoicing.pitch import pitch_to_note_token

# ── ANSI colours ────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
RESET = "\033[0m"


def _read_text(args) -> str:
    if args.progression:
        return args.progression
    if args.preset:
        return PRESET_PROGRESSIONS[args.preset]
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def print_rows(rows, colour=True):
    bold, cyan, reset = (BOLD, CYAN, RESET) if colour else ("", "", "")
    for i, row in enumerate(rows):
        print(f"{bold}── Line {i + 1} {'─' * 50}{reset}")
        for voiced in row:
            marked = [
                f"{cyan}{n}*{reset}" if n in voiced.changed else n
                for n in voiced.notes
            ]
            print(f"   {voiced.chord:<8} {' '.join(marked):<30} {voiced.description}")
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Voice jazz chord progressions.")
    parser.add_argument("progression", nargs="?", default=None,
                        help="Progression text; lines by newline, chords by comma")
    parser.add_argument("--file", type=str, default=None, help="Read progression from file")
    parser.add_argument("--preset", choices=sorted(PRESET_PROGRESSIONS), default=None)
    parser.add_argument("--low", type=str, default=pitch_to_note_token(LOW_BOUND),
                        help="Lowest legal note (default: %(default)s)")
    parser.add_argument("--high", type=str, default=pitch_to_note_token(HIGH_BOUND),
                        help="Highest legal note (default: %(default)s)")
    parser.add_argument("--json", action="store_true", help="Print rows as JSON")
    parser.add_argument("--musicxml", type=str, default=None, help="Also write MusicXML here")
    parser.add_argument("--no-colour", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = VoicingConfig.from_note_tokens(args.low, args.high)
    except ValueError as e:
        parser.error(str(e))

    rows = voice_progression(_read_text(args), config)
    if not rows:
        print("No voicings: no recognised chords in input.")
        return 1

    if args.json:
        print(json.dumps([[v.to_dict() for v in row] for row in rows], indent=2))
    else:
        print_rows(rows, colour=not args.no_colour)

    if args.musicxml:
        path = write_musicxml(rows, args.musicxml)
        print(f"Saved {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
