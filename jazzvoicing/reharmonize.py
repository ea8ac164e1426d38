"""
Minor ii–V–i detection: the V7 of a minor cadence is played as an altered
dominant (G7 → Galt in Dm7, G7, Cm7).
"""
import logging

from jazzvoicing.parser import split_root

logger = logging.getLogger(__name__)

_NOT_DOMINANT = ("M7", "m7", "m7b5", "dim7")


def _suffix(token: str):
    parts = split_root(token)
    return None if parts is None else parts[1]


def is_two(token: str) -> bool:
    """Minor seventh (half-diminished included): contains 'm7', not 'M7'."""
    s = _suffix(token)
    return s is not None and "m7" in s and "M7" not in s


def is_five(token: str) -> bool:
    """Plain dominant seventh."""
    s = _suffix(token)
    return s is not None and s.endswith("7") and s not in _NOT_DOMINANT


def is_one(token: str) -> bool:
    """Minor tonic: suffix starts with a lowercase 'm'."""
    s = _suffix(token)
    return s is not None and s.startswith("m")


def alter_dominant(token: str) -> str:
    """'G7' → 'Galt'."""
    return token[:-1] + "alt"


def apply_altered_dominants(tokens: list[str]) -> list[str]:
    """
    Return a copy of `tokens` with the five of every minor ii–V–i rewritten.

    All triples are classified against the original tokens before any
    rewrite, so overlapping cadences are each detected.
    """
    targets = [
        i + 1
        for i in range(len(tokens) - 2)
        if is_two(tokens[i]) and is_five(tokens[i + 1]) and is_one(tokens[i + 2])
    ]
    out = list(tokens)
    for idx in targets:
        out[idx] = alter_dominant(tokens[idx])
        logger.debug("ii-V-i at %d: %s → %s", idx - 1, tokens[idx], out[idx])
    return out
