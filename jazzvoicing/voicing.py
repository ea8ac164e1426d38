"""
Rootless voicing generation inside a fixed register window.

For a root and a quality, every inversion of the quality's four-note
rootless voicing is built, then moved by whole octaves into the window
[config.low_bound, config.high_bound]. Inversions that cannot fit are
discarded. If none fit, a single voicing is built by folding each note into
the window on its own.
"""
import logging

from jazzvoicing.config import DEFAULT_CONFIG
from jazzvoicing.constants import VOICING_TABLE
from jazzvoicing.parser import ChordSymbol
from jazzvoicing.pitch import note_name_to_pitch_class, pitch_to_note_token

logger = logging.getLogger(__name__)


def _base_pitches(root_pc, intervals, config):
    base = config.base_octave * 12 + root_pc
    return sorted(base + iv for iv in intervals)


def _invert(pitches, k):
    """Raise the lowest k pitches by an octave."""
    return sorted([p + 12 for p in pitches[:k]] + pitches[k:])


def _fit_to_window(pitches, config):
    """Shift by whole octaves so the chord sits in the window, or None."""
    lo, hi = min(pitches), max(pitches)
    # Smallest octave shift that lifts the lowest note to low_bound or above.
    shift = -((lo - config.low_bound) // 12) * 12
    if hi + shift > config.high_bound:
        return None
    return [p + shift for p in pitches]


def _fold_into_window(pitch, config):
    while pitch < config.low_bound:
        pitch += 12
    while pitch > config.high_bound:
        pitch -= 12
    return pitch


def pitch_candidates(root_pc: int, quality: str, config=DEFAULT_CONFIG,
                     table=VOICING_TABLE) -> list[tuple[int, ...]]:
    """
    All window-legal inversions of `quality` on `root_pc`, as ascending pitch
    tuples, in inversion order (0..3). Never empty: falls back to one folded
    voicing when no inversion fits.
    """
    intervals = table[quality]
    base = _base_pitches(root_pc, intervals, config)

    candidates = []
    for k in range(len(base)):
        fitted = _fit_to_window(_invert(base, k), config)
        if fitted is not None:
            candidates.append(tuple(sorted(fitted)))

    if not candidates:
        fallback = tuple(sorted(_fold_into_window(p, config) for p in base))
        logger.debug("no inversion of %r on pc %d fits %d-%d; fallback %s",
                     quality, root_pc, config.low_bound, config.high_bound, fallback)
        candidates.append(fallback)
    return candidates


def generate_voicing(chord: ChordSymbol, config=DEFAULT_CONFIG,
                     table=VOICING_TABLE) -> list[list[str]]:
    """Candidates for a parsed chord as lists of note tokens, e.g. ['E2', 'G2', 'B2', 'D3']."""
    root_pc = note_name_to_pitch_class(chord.root)
    return [
        [pitch_to_note_token(p) for p in cand]
        for cand in pitch_candidates(root_pc, chord.quality, config, table)
    ]
