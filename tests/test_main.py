"""
Tests for the tone table command line entry point.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from tonegrid.__main__ import main
from tonegrid.logger import get_logger


class TestMain:
    """python -m tonegrid"""
    
    def test_default_table(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["tonegrid"])
        assert main() == 0
        lines = capsys.readouterr().out.splitlines()
        table = [line for line in lines if line.endswith("Hz")]
        assert len(table) == 128
        assert " 69    A4    440.0000 Hz" in table
    
    def test_tun_file_table(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "flat.tun"
        path.write_text("basefreq=100\n", encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["tonegrid", str(path)])
        assert main() == 0
        out = capsys.readouterr().out
        # Custom tunings render tone numbers, not names
        assert "  0     0    100.0000 Hz" in out
    
    def test_missing_tun_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.argv", ["tonegrid", str(tmp_path / "nope.tun")])
        assert main() == 1


class TestLogger:
    def test_default_name(self):
        assert get_logger().name == "tonegrid"
    
    def test_module_name(self):
        assert get_logger("tonegrid.tuning").name == "tonegrid.tuning"
