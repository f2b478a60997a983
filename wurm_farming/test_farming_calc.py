"""
Tests for the console calculator (farming_calc.py).
"""
import pytest
from wurm_farming.farming_calc import main


class TestMain:

    def test_report(self, capsys):
        assert main(["50", "50", "0", "0"]) == 0
        out = capsys.readouterr().out
        assert "FARMING DIFFICULTY" in out
        assert "wheat at 30 difficulty." in out

    def test_scan_table(self, capsys):
        main(["50", "50", "0", "0", "--scan"])
        out = capsys.readouterr().out
        assert "|Gain-20|" in out
        assert " <" in out

    def test_solve(self, capsys):
        assert main(["--solve", "0"]) == 0
        out = capsys.readouterr().out
        assert "1,000,000" in out
        assert "19.8" in out

    def test_wrong_argument_count(self):
        with pytest.raises(SystemExit) as exc:
            main(["50", "50"])
        assert exc.value.code == 2

    def test_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["150", "50", "0", "0"])
        assert exc.value.code == 2
        assert "skill must be between 0 and 100" in capsys.readouterr().err
