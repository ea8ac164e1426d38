# ── Pitch-class lookup tables ─────────────────────────────────────────────────

_NOTE_TO_PC: dict[str, int] = {
    "C": 0,  "C#": 1,  "Db": 1,  "D": 2,  "D#": 3,  "Eb": 3,
    "E": 4,  "F": 5,   "F#": 6,  "Gb": 6, "G": 7,   "G#": 8,
    "Ab": 8, "A": 9,   "A#": 10, "Bb": 10, "B": 11,
    "Cb": 11, "Fb": 4, "E#": 5,  "B#": 0,
}
# Canonical (sharp) spelling used for every note token the engine emits.
_PC_TO_NOTE: list[str] = [
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
]
# Flat spelling, display only.
_PC_TO_FLAT_NOTE: list[str] = [
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]

# ── Register window ───────────────────────────────────────────────────────────
# Absolute pitch = octave * 12 + pitch class, so C#2 = 25 and D#3 = 39.
LOW_BOUND = 25
HIGH_BOUND = 39
BASE_OCTAVE = 2

# ── Rootless voicings ─────────────────────────────────────────────────────────
# Semitones above the (omitted) root, lowest first.
_MAJ7 = (4, 7, 11, 14)     # 3 5 7 9
_MIN7 = (3, 7, 10, 14)     # b3 5 b7 9
_DOM7 = (4, 7, 10, 14)     # 3 5 b7 9
_HALF_DIM = (3, 6, 10, 14)  # b3 b5 b7 9
_DIM7 = (3, 6, 9, 14)      # b3 b5 bb7 9
_ALT = (4, 10, 13, 18)     # 3 b7 b9 #11

VOICING_TABLE: dict[str, tuple[int, ...]] = {
    "":     _MAJ7,
    "M":    _MAJ7,
    "M7":   _MAJ7,
    "m":    _MIN7,
    "m7":   _MIN7,
    "7":    _DOM7,
    "m7b5": _HALF_DIM,
    "dim7": _DIM7,
    "alt":  _ALT,
}

# Long names for descriptions: quality suffix → "Major 7", ...
QUALITY_NAMES: dict[str, str] = {
    "":     "Major 7",
    "M":    "Major 7",
    "M7":   "Major 7",
    "m":    "minor 7",
    "m7":   "minor 7",
    "7":    "dominant 7",
    "m7b5": "minor 7 flat 5",
    "dim7": "diminished 7",
    "alt":  "altered dominant",
}

# ── Preset progressions ───────────────────────────────────────────────────────
PRESET_PROGRESSIONS: dict[str, str] = {
    "diatonic":     "CM7, Dm7, Em7, FM7, G7, Am7, Bm7b5",
    "ii-V-I":       "Dm7, G7, CM7",
    "minor ii-V-i": "Dm7b5, G7, Cm7",
    "rhythm":       "CM7, Am7, Dm7, G7\nEm7, A7, Dm7, G7",
    "autumn":       "Am7, D7, GM7, CM7\nF#m7b5, B7, Em7",
}
