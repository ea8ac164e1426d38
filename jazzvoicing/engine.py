"""
Progression text → voiced rows.

    text ─► lines ─► tokens ─► ii–V–i pass ─► parse ─► candidates ─► DP ─► rows

Each line is voiced independently; lines with no valid chord produce no row.
"""
import logging
from dataclasses import dataclass, field

from jazzvoicing.config import DEFAULT_CONFIG
from jazzvoicing.constants import QUALITY_NAMES, VOICING_TABLE
from jazzvoicing.parser import parse_chord_symbol, split_lines, split_tokens
from jazzvoicing.pitch import pitch_class_to_note_name, pitch_to_note_token, to_flat_name
from jazzvoicing.reharmonize import apply_altered_dominants
from jazzvoicing.voice_leading import changed_positions, optimize_line
from jazzvoicing.voicing import pitch_candidates

logger = logging.getLogger(__name__)


@dataclass
class VoicedChord:
    """One chord of one row, ready for a keyboard renderer."""

    chord: str
    notes: list[str]
    changed: list[str] = field(default_factory=list)
    name: str = ""
    description: str = ""

    def to_dict(self):
        return {
            "chord": self.chord,
            "notes": list(self.notes),
            "changed": list(self.changed),
            "name": self.name,
            "description": self.description,
        }


def describe_chord(symbol, pitches) -> tuple[str, str]:
    """
    ('C Major 7', 'E - G - B - D') style labels. Notes are spelled with flats
    and listed in the order given.
    """
    name = f"{symbol.root} {QUALITY_NAMES.get(symbol.quality, symbol.quality)}"
    description = " - ".join(
        to_flat_name(pitch_class_to_note_name(p % 12)) for p in pitches
    )
    return name, description


def voice_line(line: str, config=DEFAULT_CONFIG, table=VOICING_TABLE) -> list[VoicedChord]:
    """Voice one comma-separated line. Empty list when nothing parses."""
    tokens = apply_altered_dominants(split_tokens(line))

    chords = []
    for tok in tokens:
        symbol = parse_chord_symbol(tok, table)
        if symbol is None:
            logger.debug("dropping unrecognised chord %r", tok)
            continue
        chords.append(symbol)
    if not chords:
        return []

    candidate_lists = [
        pitch_candidates(sym.root_pc, sym.quality, config, table) for sym in chords
    ]
    chosen = optimize_line(candidate_lists)

    row = []
    previous = None
    for symbol, cand in zip(chords, chosen):
        pitches = sorted(cand)
        changed_idx = changed_positions(previous, pitches)
        name, description = describe_chord(symbol, pitches)
        row.append(VoicedChord(
            chord=str(symbol),
            notes=[pitch_to_note_token(p) for p in pitches],
            changed=[pitch_to_note_token(pitches[i]) for i in changed_idx],
            name=name,
            description=description,
        ))
        previous = pitches
    return row


def voice_progression(text: str, config=DEFAULT_CONFIG,
                      table=VOICING_TABLE) -> list[list[VoicedChord]]:
    """Voice every line of `text`; one row per line that has a valid chord."""
    rows = []
    for line in split_lines(text):
        row = voice_line(line, config, table)
        if row:
            rows.append(row)
    return rows
