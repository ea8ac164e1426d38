"""
Note names, pitch classes and absolute pitches.

Absolute pitch = octave * 12 + pitch class (C0 = 0, C#2 = 25). This is the
engine's own numbering; it is MIDI minus 12.
"""
import re

from jazzvoicing.constants import _NOTE_TO_PC, _PC_TO_NOTE, _PC_TO_FLAT_NOTE

_NOTE_TOKEN_RE = re.compile(r"^([A-G][#b]?)(-?\d+)$")


class UnknownNoteError(ValueError):
    """Note name is not in the enharmonic table."""


class MalformedTokenError(ValueError):
    """Token is not a note name followed by an octave number."""


def note_name_to_pitch_class(name: str) -> int:
    """Map a note name (e.g. 'C', 'F#', 'Gb') to its pitch class (0-11)."""
    pc = _NOTE_TO_PC.get(name)
    if pc is None:
        raise UnknownNoteError(f"Unknown note name: {name!r}")
    return pc


def pitch_class_to_note_name(pc: int) -> str:
    return _PC_TO_NOTE[pc % 12]


def to_flat_name(name: str) -> str:
    """Re-spell a note name with flats ('C#' → 'Db'). Display only."""
    return _PC_TO_FLAT_NOTE[note_name_to_pitch_class(name)]


def parse_note_token(token: str) -> int:
    """'C#4' → 49."""
    m = _NOTE_TOKEN_RE.match(token.strip())
    if not m:
        raise MalformedTokenError(f"Malformed note token: {token!r}")
    name, octave = m.group(1), int(m.group(2))
    return octave * 12 + note_name_to_pitch_class(name)


def pitch_to_note_token(pitch: int) -> str:
    """49 → 'C#4'. Octave is floor(pitch / 12)."""
    return f"{pitch_class_to_note_name(pitch % 12)}{pitch // 12}"
