"""Unit tests for log date range and limit filtering."""

from datetime import date

from services.log_filter import filter_log_by_dates, filter_log_by_limit


def _entry(description: str, day: str) -> dict:
    return {"description": description, "duration": 10, "date": day}


LOG = [
    _entry("swim", "Thu Feb 01 2024"),
    _entry("bike", "Mon Jan 15 2024"),
    _entry("run", "Mon Jan 01 2024"),
]


class TestFilterLogByDates:
    """Tests for filter_log_by_dates."""

    def test_no_bounds_keeps_everything(self) -> None:
        result = filter_log_by_dates(LOG, None, None)
        assert result == LOG
        assert result is not LOG

    def test_closed_range(self) -> None:
        result = filter_log_by_dates(LOG, date(2024, 1, 10), date(2024, 1, 31))
        assert [e["description"] for e in result] == ["bike"]

    def test_bounds_are_inclusive(self) -> None:
        result = filter_log_by_dates(LOG, date(2024, 1, 1), date(2024, 1, 15))
        assert [e["description"] for e in result] == ["bike", "run"]

    def test_lower_bound_only(self) -> None:
        result = filter_log_by_dates(LOG, date(2024, 1, 10), None)
        assert [e["description"] for e in result] == ["swim", "bike"]

    def test_upper_bound_only(self) -> None:
        result = filter_log_by_dates(LOG, None, date(2024, 1, 10))
        assert [e["description"] for e in result] == ["run"]

    def test_unreadable_dates_dropped_when_bounded(self) -> None:
        log = LOG + [_entry("broken", "Invalid Date")]
        result = filter_log_by_dates(log, date(2000, 1, 1), None)
        assert "broken" not in [e["description"] for e in result]
        assert len(filter_log_by_dates(log, None, None)) == 4


class TestFilterLogByLimit:
    """Tests for filter_log_by_limit."""

    def test_zero_means_unlimited(self) -> None:
        assert filter_log_by_limit(LOG, 0) == LOG

    def test_takes_head_in_existing_order(self) -> None:
        log = [_entry(str(i), "Mon Jan 01 2024") for i in range(5)]
        result = filter_log_by_limit(log, 2)
        assert [e["description"] for e in result] == ["0", "1"]

    def test_limit_larger_than_log(self) -> None:
        assert filter_log_by_limit(LOG, 10) == LOG
