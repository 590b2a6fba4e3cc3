"""
Tests for tempo, level and pan conversion functions.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import pytest
import numpy as np
from tonegrid import (
    RESOLUTION,
    tempo_ms_to_tick,
    tempo_tick_to_ms,
    decibel_to_linear,
    linear_to_decibel,
    pan_to_channel_volumes,
)


class TestTempoConversions:
    """Test tick <-> millisecond conversions."""
    
    def test_resolution_is_480(self):
        assert RESOLUTION == 480
    
    def test_one_beat_at_120_bpm(self):
        assert tempo_ms_to_tick(120, 500) == pytest.approx(480.0)
        assert tempo_tick_to_ms(120, 480) == pytest.approx(500.0)
    
    def test_one_beat_at_60_bpm(self):
        assert tempo_tick_to_ms(60, 480) == pytest.approx(1000.0)
    
    def test_roundtrip(self):
        for tempo in (45.0, 97.5, 180.0):
            ticks = tempo_ms_to_tick(tempo, 1234.5)
            assert tempo_tick_to_ms(tempo, ticks) == pytest.approx(1234.5)


class TestDecibelConversions:
    """Test dB <-> linear conversions."""
    
    def test_unity(self):
        assert linear_to_decibel(1.0) == pytest.approx(0.0)
        assert decibel_to_linear(0.0) == pytest.approx(1.0)
    
    def test_ten_is_twenty_db(self):
        assert linear_to_decibel(10.0) == pytest.approx(20.0)
        assert decibel_to_linear(-20.0) == pytest.approx(0.1)
    
    def test_roundtrip(self):
        values = np.array([1e-4, 0.25, 1.0, 3.7, 1000.0])
        np.testing.assert_allclose(
            decibel_to_linear(linear_to_decibel(values)), values, rtol=1e-12
        )
    
    def test_roundtrip_below_floor(self):
        values = np.array([1e-12, 1e-15, 3e-11])
        np.testing.assert_allclose(
            decibel_to_linear(linear_to_decibel(values)), values, rtol=1e-9
        )
    
    def test_negative_is_floored(self):
        assert linear_to_decibel(-1.0) == pytest.approx(-200.0)
    
    def test_zero_is_floored(self):
        assert linear_to_decibel(0.0) == pytest.approx(-200.0)


class TestPanToChannelVolumes:
    """Test pan -> (left, right) mapping."""
    
    def test_center(self):
        assert pan_to_channel_volumes(0) == (-1.0, -1.0)
    
    def test_hard_right(self):
        assert pan_to_channel_volumes(100) == (0.0, -1.0)
    
    def test_hard_left(self):
        assert pan_to_channel_volumes(-100) == (-1.0, 0.0)
    
    def test_half_right(self):
        assert pan_to_channel_volumes(50) == pytest.approx((-0.5, -1.0))
    
    def test_volumes_stay_in_range(self):
        for pan in range(-100, 101, 5):
            left, right = pan_to_channel_volumes(pan)
            assert -1.0 <= left <= 0.0
            assert -1.0 <= right <= 0.0
