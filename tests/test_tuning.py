"""
Tests for tone <-> frequency resolution.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import pytest
import numpy as np

from tonegrid import (
    TuningConfig,
    tone_to_freq,
    fractional_tone_to_freq,
    freq_to_tone,
)


def _stretched_map():
    """A 128-entry map 10 cents sharp of 12-ET."""
    tones = np.arange(128, dtype=np.float64)
    return 440.0 * 2.0 ** ((tones - 69 + 0.1) / 12)


class TestFormula:
    """Formula path, no frequency map."""
    
    def test_a4(self):
        assert tone_to_freq(69) == pytest.approx(440.0)
    
    def test_middle_c(self):
        assert tone_to_freq(60) == pytest.approx(261.6256, rel=1e-4)
    
    def test_custom_concert_pitch(self):
        assert tone_to_freq(69, concert_pitch=432.0) == pytest.approx(432.0)
        assert tone_to_freq(60, concert_pitch=256.0, concert_pitch_note=60) == pytest.approx(256.0)
    
    def test_19et(self):
        assert tone_to_freq(69 + 19, equal_temperament=19) == pytest.approx(880.0)
    
    def test_fractional_quarter_tone(self):
        expected = 440.0 * 2.0 ** (0.5 / 12)
        assert fractional_tone_to_freq(69.5) == pytest.approx(expected)
    
    def test_returns_float(self):
        assert isinstance(tone_to_freq(69), float)
        assert isinstance(fractional_tone_to_freq(69.5), float)
    
    def test_out_of_map_range_tones(self):
        assert tone_to_freq(-12) == pytest.approx(440.0 * 2.0 ** (-81 / 12))
        assert tone_to_freq(140) == pytest.approx(440.0 * 2.0 ** (71 / 12))
    
    @pytest.mark.parametrize("et,pitch,note", [(12, 440.0, 69), (19, 415.0, 57), (31, 261.6, 60)])
    def test_roundtrip(self, et, pitch, note):
        for tone in (0.0, 33.3, 69.0, 127.9):
            freq = fractional_tone_to_freq(tone, None, et, pitch, note)
            assert freq_to_tone(freq, et, pitch, note) == pytest.approx(tone)
    
    def test_roundtrip_far_below_map(self):
        assert freq_to_tone(tone_to_freq(-500)) == pytest.approx(-500.0)
    
    def test_custom_sentinel_uses_12_divisions(self):
        assert tone_to_freq(81, equal_temperament=0) == pytest.approx(880.0)
        assert freq_to_tone(880.0, equal_temperament=0) == pytest.approx(81.0)


class TestTableLookup:
    """Table path with an installed frequency map."""
    
    def setup_method(self):
        self.table = _stretched_map()
        self.config = TuningConfig(0, 440.0, 69, self.table)
    
    def _args(self):
        return (self.config, 0, 440.0, 69)
    
    def test_integer_lookup(self):
        for tone in (0, 60, 127):
            assert tone_to_freq(tone, *self._args()) == self.table[tone]
    
    def test_parameters_must_match(self):
        freq = tone_to_freq(69, self.config, 12, 440.0, 69)
        assert freq == pytest.approx(440.0)
        freq = tone_to_freq(69, self.config, 0, 432.0, 69)
        assert freq == pytest.approx(432.0)
    
    def test_no_config_uses_formula(self):
        assert tone_to_freq(69, None, 0, 440.0, 69) == pytest.approx(440.0)
    
    def test_integer_out_of_range_uses_formula(self):
        assert tone_to_freq(128, *self._args()) == pytest.approx(440.0 * 2.0 ** (59 / 12))
        assert tone_to_freq(-1, *self._args()) == pytest.approx(440.0 * 2.0 ** (-70 / 12))
    
    def test_fractional_whole_tone_is_exact(self):
        assert fractional_tone_to_freq(60.0, *self._args()) == self.table[60]
        assert fractional_tone_to_freq(60.0000001, *self._args()) == self.table[60]
    
    def test_fractional_is_geometric(self):
        expected = np.sqrt(self.table[60] * self.table[61])
        assert fractional_tone_to_freq(60.5, *self._args()) == pytest.approx(expected)
    
    def test_fractional_not_linear_in_hz(self):
        linear_mid = (self.table[60] + self.table[61]) / 2
        assert fractional_tone_to_freq(60.5, *self._args()) < linear_mid
    
    def test_fractional_top_tone_uses_formula(self):
        # 127.0 needs table[128] as upper neighbour
        assert fractional_tone_to_freq(127.0, *self._args()) == pytest.approx(
            440.0 * 2.0 ** (58 / 12)
        )
    
    def test_non_positive_entries_fall_back(self):
        table = self.table.copy()
        table[61] = 0.0
        config = TuningConfig(0, 440.0, 69, table)
        freq = fractional_tone_to_freq(60.5, config, 0, 440.0, 69)
        assert freq == pytest.approx(440.0 * 2.0 ** (-8.5 / 12))
    
    def test_freq_to_tone_ignores_map(self):
        freq = tone_to_freq(69, self.config, 12, 440.0, 69)
        assert freq_to_tone(freq) == pytest.approx(69.0)
        mapped = tone_to_freq(69, *self._args())
        assert freq_to_tone(mapped) == pytest.approx(69.1)
