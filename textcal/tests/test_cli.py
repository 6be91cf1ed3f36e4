"""Tests for the command line entry point."""

from datetime import date

import pytest

from textcal.src.cli import main
from textcal.src.document import MODELINE


class TestMain:
    def test_writes_calendar(self, tmp_path, capsys):
        main(["2026", "--out-dir", str(tmp_path)])
        assert (tmp_path / "textcal-2026.txt").exists()
        out = capsys.readouterr().out
        assert "Holidays: 16, bridge days: 4" in out

    def test_default_year_is_current(self, tmp_path):
        main(["--out-dir", str(tmp_path)])
        assert (tmp_path / f"textcal-{date.today().year}.txt").exists()

    def test_stdout(self, tmp_path, capsys):
        main(["2024", "--stdout", "--out-dir", str(tmp_path)])
        out = capsys.readouterr().out
        assert out.startswith("Textkalender 2024\n")
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize("year", ["1999", "abc", "0", "2²24"])
    def test_invalid_year(self, year, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([year, "--out-dir", str(tmp_path)])
        assert exc.value.code == 2
        assert "year" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []

    def test_existing_file(self, tmp_path):
        main(["2026", "--out-dir", str(tmp_path)])
        with pytest.raises(SystemExit) as exc:
            main(["2026", "--out-dir", str(tmp_path)])
        assert exc.value.code == 1
        main(["2026", "--out-dir", str(tmp_path), "--force"])

    def test_csv_from_config(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text(f"output:\n  directory: '{tmp_path / 'out'}'\n  csv: true\n")
        main(["2025", "--config", str(cfg)])
        assert (tmp_path / "out" / "textcal-2025.txt").exists()
        assert (tmp_path / "out" / "textcal-2025.csv").exists()

    def test_stdout_with_csv_keeps_calendar_last(self, tmp_path, capsys):
        main(["2026", "--stdout", "--csv", "--out-dir", str(tmp_path)])
        captured = capsys.readouterr()
        assert captured.out.splitlines()[-1] == MODELINE
        assert "textcal-2026.csv" in captured.err
        assert (tmp_path / "textcal-2026.csv").exists()

    def test_existing_csv(self, tmp_path):
        main(["2026", "--stdout", "--csv", "--out-dir", str(tmp_path)])
        with pytest.raises(SystemExit) as exc:
            main(["2026", "--stdout", "--csv", "--out-dir", str(tmp_path)])
        assert exc.value.code == 1
        main(["2026", "--stdout", "--csv", "--out-dir", str(tmp_path), "--force"])
