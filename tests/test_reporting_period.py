from __future__ import annotations

from datetime import date

import pytest

from db.repositories.types import MAX_YEAR, ReportingPeriod


class TestReportingPeriod:
    def test_bounds_are_half_open(self) -> None:
        period = ReportingPeriod(year=2026, month=1)
        assert period.start == date(2026, 1, 1)
        assert period.end == date(2026, 2, 1)
        assert period.contains(date(2026, 1, 31))
        assert not period.contains(date(2026, 2, 1))

    def test_december_rolls_into_next_year(self) -> None:
        period = ReportingPeriod(year=2025, month=12)
        assert period.end == date(2026, 1, 1)

    def test_current_uses_given_day(self) -> None:
        assert ReportingPeriod.current(date(2026, 10, 19)) == ReportingPeriod(2026, 10)

    def test_current_defaults_to_today(self) -> None:
        today = date.today()
        assert ReportingPeriod.current() == ReportingPeriod(today.year, today.month)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_rejects_invalid_month(self, month: int) -> None:
        with pytest.raises(ValueError):
            ReportingPeriod(year=2026, month=month)

    def test_str_is_zero_padded(self) -> None:
        assert str(ReportingPeriod(2026, 3)) == "2026-03"

    def test_last_supported_december_has_valid_end(self) -> None:
        period = ReportingPeriod(year=MAX_YEAR, month=12)
        assert period.end == date(MAX_YEAR + 1, 1, 1)

    @pytest.mark.parametrize("year", [0, MAX_YEAR + 1])
    def test_rejects_year_without_representable_end(self, year: int) -> None:
        with pytest.raises(ValueError, match="year must be between"):
            ReportingPeriod(year=year, month=12)
