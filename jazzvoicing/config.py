"""Read-only engine configuration: the legal register window and base octave."""
from dataclasses import dataclass

from jazzvoicing.constants import LOW_BOUND, HIGH_BOUND, BASE_OCTAVE
from jazzvoicing.pitch import parse_note_token


@dataclass(frozen=True)
class VoicingConfig:
    low_bound: int = LOW_BOUND
    high_bound: int = HIGH_BOUND
    base_octave: int = BASE_OCTAVE

    def __post_init__(self):
        if self.low_bound > self.high_bound:
            raise ValueError(
                f"low_bound ({self.low_bound}) is above high_bound ({self.high_bound})"
            )

    @classmethod
    def from_note_tokens(cls, low: str, high: str, base_octave: int = BASE_OCTAVE):
        """Build a window from note tokens, e.g. ("C#2", "D#3")."""
        return cls(parse_note_token(low), parse_note_token(high), base_octave)

    def contains(self, pitch: int) -> bool:
        return self.low_bound <= pitch <= self.high_bound


DEFAULT_CONFIG = VoicingConfig()
