"""Tests for the per-day table and CSV export."""

from datetime import date

import pandas as pd
import pytest

from textcal.src.bridge_days import get_bridge_days
from textcal.src.holidays import get_holidays
from textcal.src.table import COLUMNS, write_csv, year_table


class TestYearTable:
    def test_shape(self):
        df = year_table(2024)
        assert list(df.columns) == COLUMNS
        assert len(df) == 366
        assert len(year_table(2026)) == 365

    def test_days_consecutive(self):
        df = year_table(2026)
        assert df["day_of_year"].tolist() == list(range(1, 366))
        assert df["date"].iloc[0] == date(2026, 1, 1)
        assert df["date"].iloc[-1] == date(2026, 12, 31)

    def test_weeks_match_isocalendar(self):
        df = year_table(2026)
        expected = [d.isocalendar()[1] for d in df["date"]]
        assert df["week"].tolist() == expected

    def test_label_counts(self):
        df = year_table(2024)
        holidays = get_holidays(2024)
        assert (df["holiday"] != "").sum() == len(holidays)
        assert (df["bridge_day"] != "").sum() == len(get_bridge_days(2024, holidays))

    def test_weekday_abbreviation(self):
        df = year_table(2024)
        assert df.loc[0, "weekday"] == "Mon"
        assert df.loc[df["holiday"] == "Karfreitag", "weekday"].item() == "Fre"


class TestWriteCsv:
    def test_round_trip(self, tmp_path):
        path = write_csv(2025, tmp_path)
        assert path.name == "textcal-2025.csv"
        df = pd.read_csv(path, keep_default_na=False)
        assert len(df) == 365
        assert df.loc[0, "holiday"] == "Neujahr"
        assert df.loc[1, "holiday"] == ""

    def test_refuses_overwrite(self, tmp_path):
        write_csv(2025, tmp_path)
        with pytest.raises(FileExistsError):
            write_csv(2025, tmp_path)
        write_csv(2025, tmp_path, overwrite=True)
