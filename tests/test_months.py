"""Unit tests for month key normalization."""

from datetime import date, datetime, timezone

import pytest

from review_portal.core.months import month_label, normalize_month, previous_month_start

NOW = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


def test_day_is_forced_to_first() -> None:
    assert normalize_month("2026-03-17", now=NOW) == date(2026, 3, 1)
    assert normalize_month("2026-03-01", now=NOW).isoformat() == "2026-03-01"


@pytest.mark.parametrize(
    "value",
    [None, "", "2026-3-17", "03/17/2026", "2026-03", "not-a-month", "2026-13-01", "2026-00-10", " 2026-03-17x"],
)
def test_malformed_or_absent_falls_back_to_previous_month(value) -> None:
    assert normalize_month(value, now=NOW) == date(2026, 9, 1)


def test_previous_month_wraps_year() -> None:
    january = datetime(2027, 1, 5, tzinfo=timezone.utc)
    assert previous_month_start(january) == date(2026, 12, 1)
    assert normalize_month(None, now=january).isoformat() == "2026-12-01"


def test_default_uses_current_time() -> None:
    result = normalize_month()
    assert result.day == 1
    assert result == previous_month_start()


def test_month_label() -> None:
    assert month_label(date(2026, 9, 1)) == "September 2026"
