import unittest
from jazzvoicing.config import VoicingConfig, DEFAULT_CONFIG
from jazzvoicing.constants import VOICING_TABLE
from jazzvoicing.parser import ChordSymbol
from jazzvoicing.voicing import pitch_candidates, generate_voicing

# Every rotation spans more than two octaves.
_WIDE_TABLE = {"wide": (0, 13, 26, 39)}


class TestVoicingTable(unittest.TestCase):
    def test_structure(self):
        for quality, intervals in VOICING_TABLE.items():
            self.assertIsInstance(quality, str)
            self.assertEqual(len(intervals), 4, quality)
            self.assertEqual(list(intervals), sorted(intervals), quality)

    def test_shared_voicings(self):
        self.assertEqual(VOICING_TABLE[""], VOICING_TABLE["M7"])
        self.assertEqual(VOICING_TABLE["M"], VOICING_TABLE["M7"])
        self.assertEqual(VOICING_TABLE["m"], VOICING_TABLE["m7"])

    def test_known_voicings(self):
        self.assertEqual(VOICING_TABLE["7"], (4, 7, 10, 14))       # 3 5 b7 9
        self.assertEqual(VOICING_TABLE["alt"], (4, 10, 13, 18))    # 3 b7 b9 #11


class TestPitchCandidates(unittest.TestCase):
    def test_cmaj7(self):
        # Root position E2 G2 B2 D3 and the third inversion shifted down.
        self.assertEqual(pitch_candidates(0, "M7"), [(28, 31, 35, 38), (26, 28, 31, 35)])

    def test_g7(self):
        self.assertEqual(pitch_candidates(7, "7"), [(26, 29, 33, 35), (29, 33, 35, 38)])

    def test_dm7_single_fit(self):
        self.assertEqual(pitch_candidates(2, "m7"), [(28, 29, 33, 36)])

    def test_every_quality_inside_window(self):
        for root_pc in range(12):
            for quality in VOICING_TABLE:
                cands = pitch_candidates(root_pc, quality)
                self.assertTrue(cands, (root_pc, quality))
                self.assertLessEqual(len(cands), 4)
                for cand in cands:
                    self.assertEqual(len(cand), 4)
                    self.assertEqual(list(cand), sorted(cand))
                    for p in cand:
                        self.assertTrue(25 <= p <= 39, (root_pc, quality, cand))

    def test_fallback_when_nothing_fits(self):
        cands = pitch_candidates(0, "wide", table=_WIDE_TABLE)
        self.assertEqual(cands, [(36, 37, 38, 39)])

    def test_fallback_with_narrow_window(self):
        narrow = VoicingConfig(low_bound=25, high_bound=30)
        cands = pitch_candidates(0, "M7", config=narrow)
        self.assertEqual(len(cands), 1)
        self.assertEqual(len(cands[0]), 4)

    def test_window_is_configurable(self):
        higher = VoicingConfig(low_bound=DEFAULT_CONFIG.low_bound + 12,
                               high_bound=DEFAULT_CONFIG.high_bound + 12)
        self.assertEqual(pitch_candidates(0, "M7", config=higher),
                         [(40, 43, 47, 50), (38, 40, 43, 47)])

    def test_pure(self):
        self.assertEqual(pitch_candidates(5, "m7b5"), pitch_candidates(5, "m7b5"))


class TestGenerateVoicing(unittest.TestCase):
    def test_note_tokens(self):
        self.assertEqual(
            generate_voicing(ChordSymbol("C", "M7")),
            [["E2", "G2", "B2", "D3"], ["D2", "E2", "G2", "B2"]],
        )

    def test_enharmonic_roots_match(self):
        self.assertEqual(generate_voicing(ChordSymbol("Db", "7")),
                         generate_voicing(ChordSymbol("C#", "7")))

    def test_altered_dominant(self):
        self.assertEqual(generate_voicing(ChordSymbol("G", "alt")), [["F2", "G#2", "B2", "C#3"]])


if __name__ == "__main__":
    unittest.main()
