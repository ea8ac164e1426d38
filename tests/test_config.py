import dataclasses
import unittest
from jazzvoicing.config import VoicingConfig, DEFAULT_CONFIG
from jazzvoicing.pitch import MalformedTokenError


class TestVoicingConfig(unittest.TestCase):
    def test_default_window(self):
        self.assertEqual(DEFAULT_CONFIG.low_bound, 25)
        self.assertEqual(DEFAULT_CONFIG.high_bound, 39)
        self.assertEqual(DEFAULT_CONFIG.base_octave, 2)

    def test_from_note_tokens(self):
        self.assertEqual(VoicingConfig.from_note_tokens("C#2", "D#3"), DEFAULT_CONFIG)
        cfg = VoicingConfig.from_note_tokens("C3", "C4")
        self.assertEqual((cfg.low_bound, cfg.high_bound), (36, 48))

    def test_bad_tokens(self):
        with self.assertRaises(MalformedTokenError):
            VoicingConfig.from_note_tokens("C#", "D#3")

    def test_inverted_window_rejected(self):
        with self.assertRaises(ValueError):
            VoicingConfig(low_bound=40, high_bound=30)

    def test_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.low_bound = 0

    def test_contains(self):
        self.assertTrue(DEFAULT_CONFIG.contains(25))
        self.assertTrue(DEFAULT_CONFIG.contains(39))
        self.assertFalse(DEFAULT_CONFIG.contains(24))
        self.assertFalse(DEFAULT_CONFIG.contains(40))


if __name__ == "__main__":
    unittest.main()
