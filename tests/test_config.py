"""
Tests for config module and error handling utilities.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import pytest
from tonegrid.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
)
from tonegrid import (
    InvalidParameterError,
    TuningConfig,
    get_zoom_ratio,
)


class TestErrorMode:
    """Test ErrorMode enum."""
    
    def test_strict_mode_value(self):
        assert ErrorMode.STRICT.value == "strict"
    
    def test_lenient_mode_value(self):
        assert ErrorMode.LENIENT.value == "lenient"


class TestGetSetErrorMode:
    """Test get/set error mode functions."""
    
    def test_default_is_strict(self):
        assert get_error_mode() == ErrorMode.STRICT
    
    def test_set_lenient(self):
        set_error_mode(ErrorMode.LENIENT)
        assert get_error_mode() == ErrorMode.LENIENT
    
    def test_set_strict(self):
        set_error_mode(ErrorMode.LENIENT)
        set_error_mode(ErrorMode.STRICT)
        assert get_error_mode() == ErrorMode.STRICT


class TestHandleError:
    """Test handle_error utility function."""
    
    def test_strict_mode_raises(self):
        with pytest.raises(RuntimeError, match="test error"):
            handle_error("test error")
    
    def test_lenient_mode_warns(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        result = handle_error("test warning")
        assert result is True
        assert "test warning" in caplog.text
    
    def test_fatal_always_raises_in_lenient(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(RuntimeError, match="fatal error"):
            handle_error("fatal error", fatal=True)
    
    def test_custom_exception_class(self):
        with pytest.raises(ValueError, match="value error"):
            handle_error("value error", exception_class=ValueError)
    
    def test_override_mode_parameter(self):
        # Even in strict mode, passing lenient should warn
        result = handle_error("override test", error_mode=ErrorMode.LENIENT)
        assert result is True
    
    def test_override_to_strict_raises(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(RuntimeError, match="override test"):
            handle_error("override test", error_mode=ErrorMode.STRICT)


class TestModeAwareCallers:
    """Error mode as seen through the tuning and grid APIs."""
    
    def test_bad_map_length_strict_raises(self):
        with pytest.raises(ValueError, match="128 entries"):
            TuningConfig(tone_to_freq_map=[440.0] * 12)
    
    def test_bad_map_length_lenient_drops_map(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        cfg = TuningConfig(tone_to_freq_map=[440.0] * 12)
        assert cfg.has_map is False
        assert "128 entries" in caplog.text
    
    def test_invalid_beat_unit_always_fatal(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(InvalidParameterError, match="Invalid beat unit"):
            get_zoom_ratio(100.0, 4, 3, 10.0)
