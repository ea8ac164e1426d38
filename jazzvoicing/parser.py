"""
Chord-symbol parsing and progression text splitting.

Input text: one progression per line, chords separated by commas. A chord
token is a root (A-G with an optional '#' or 'b') followed by a quality
suffix that must be a key of the voicing table ("" means major 7).
"""
import re
from typing import NamedTuple, Optional

from jazzvoicing.constants import _NOTE_TO_PC, VOICING_TABLE

_ROOT_RE = re.compile(r"^([A-G][#b]?)")


class ChordSymbol(NamedTuple):
    root: str
    quality: str

    @property
    def root_pc(self) -> int:
        return _NOTE_TO_PC[self.root]

    def __str__(self):
        return f"{self.root}{self.quality}"


def split_root(token: str) -> Optional[tuple[str, str]]:
    """
    Split a chord token into (root, suffix).

    The root is the longest match of a letter A-G plus an optional accidental,
    so 'Bb7' → ('Bb', '7') and 'Bm7' → ('B', 'm7'). Returns None when the
    token does not start with a note letter.
    """
    m = _ROOT_RE.match(token)
    if not m:
        return None
    root = m.group(1)
    return root, token[len(root):]


def parse_chord_symbol(token: str, table=VOICING_TABLE) -> Optional[ChordSymbol]:
    """Parse one token. Returns None for a bad root or an unknown quality."""
    token = token.strip()
    if not token:
        return None
    parts = split_root(token)
    if parts is None:
        return None
    root, suffix = parts
    if root not in _NOTE_TO_PC or suffix not in table:
        return None
    return ChordSymbol(root, suffix)


def split_lines(text: str) -> list[str]:
    """Trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def split_tokens(line: str) -> list[str]:
    """Trimmed, non-empty comma-separated tokens of one line."""
    return [tok.strip() for tok in line.split(",") if tok.strip()]
