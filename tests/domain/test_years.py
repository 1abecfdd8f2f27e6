"""Tests for year-range parsing."""

import pytest

from reignstat.domain.years import (
    DEGENERATE,
    YearRange,
    YearRangeParser,
    fixed_year,
    is_open_range,
    parse_years,
)


class TestParseYears:
    @pytest.mark.parametrize(
        "raw,start,end",
        [
            ("1050-1060", 1050, 1060),
            ("899-925", 899, 925),
            ("1603-1625", 1603, 1625),
        ],
    )
    def test_closed_range(self, raw: str, start: int, end: int) -> None:
        result = parse_years(raw, current_year=2024)
        assert result == YearRange(start, end)
        assert result.duration == end - start + 1

    def test_open_range_ends_in_current_year(self) -> None:
        assert parse_years("1952-", current_year=2022) == YearRange(1952, 2022)

    def test_single_year(self) -> None:
        result = parse_years("1975", current_year=2024)
        assert result.start == result.end == 1975
        assert result.duration == 1

    def test_three_digit_years(self) -> None:
        assert parse_years("946-", current_year=955) == YearRange(946, 955)

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "unknown",
            "12-40",  # too few digits
            "10500-10600",  # too many digits
            "1050 - 1060",  # spaces are not part of the pattern
            " 1050-1060",
            "1050--1060",
            "-1060",
            "1050-1060x",
        ],
    )
    def test_no_match_is_degenerate(self, raw: str) -> None:
        assert parse_years(raw, current_year=2024) == DEGENERATE

    def test_none_is_degenerate(self) -> None:
        assert parse_years(None, current_year=2024) == YearRange(0, 0)

    def test_degenerate_has_duration_one(self) -> None:
        """0-0 is inclusive too; validation reports it as wrong years."""
        assert DEGENERATE.duration == 1

    def test_reversed_range_is_not_reordered(self) -> None:
        result = parse_years("1100-1050", current_year=2024)
        assert result == YearRange(1100, 1050)
        assert result.duration == -49

    def test_idempotent(self) -> None:
        first = parse_years("1010-1050", current_year=2024)
        second = parse_years("1010-1050", current_year=2030)
        assert first == second


class TestYearRangeParser:
    def test_uses_injected_clock_for_open_range(self) -> None:
        parser = YearRangeParser(fixed_year(2000))
        assert parser.parse("1990-") == YearRange(1990, 2000)

    def test_clock_read_at_call_time(self) -> None:
        years = iter([2020, 2021])
        parser = YearRangeParser(lambda: next(years))
        assert parser.parse("2000-").end == 2020
        assert parser.parse("2000-").end == 2021

    def test_closed_range_ignores_clock(self) -> None:
        parser = YearRangeParser(fixed_year(1))
        assert parser.parse("1050-1060") == YearRange(1050, 1060)

    def test_default_clock_is_calendar(self) -> None:
        from datetime import date

        assert YearRangeParser().parse("1952-").end == date.today().year


class TestIsOpenRange:
    @pytest.mark.parametrize("raw", ["1952-", "946-"])
    def test_open(self, raw: str) -> None:
        assert is_open_range(raw) is True

    @pytest.mark.parametrize("raw", ["1952-2022", "1975", "-1952", "soon", "", None])
    def test_not_open(self, raw: str | None) -> None:
        assert is_open_range(raw) is False
