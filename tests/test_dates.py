from datetime import date

import pytest

from remission_calculator.core.dates import (
    add_duration,
    calendar_date,
    calendar_date_errors,
    days_in_calendar_month,
    fixed_to_calendar,
    parse_calendar_date,
    subtract_remission,
)
from remission_calculator.core.types import (
    CalendarDate,
    Duration,
    FixedDate,
    InvalidDate,
    Remission,
)


def test_days_in_calendar_month_handles_leap_years():
    assert days_in_calendar_month(2, 2024) == 29
    assert days_in_calendar_month(2, 2023) == 28
    assert days_in_calendar_month(2, 1900) == 28
    assert days_in_calendar_month(2, 2000) == 29
    assert days_in_calendar_month(4, 2023) == 30
    assert days_in_calendar_month(12, 2023) == 31


def test_days_in_calendar_month_matches_datetime_for_every_month():
    for year in (1999, 2000, 2023, 2024):
        for month in range(1, 13):
            next_month = date(year + month // 12, month % 12 + 1, 1)
            assert days_in_calendar_month(month, year) == (next_month - date(year, month, 1)).days


def test_calendar_date_rejects_impossible_dates():
    with pytest.raises(InvalidDate):
        calendar_date(2023, 2, 29)
    with pytest.raises(InvalidDate):
        calendar_date(2024, 13, 1)
    with pytest.raises(InvalidDate):
        calendar_date(2024, 4, 0)
    with pytest.raises(InvalidDate):
        calendar_date(10000, 1, 1)
    assert calendar_date(2024, 2, 29) == CalendarDate(2024, 2, 29)


def test_calendar_date_errors_lists_every_problem():
    assert calendar_date_errors(2024, 2, 29) == []
    assert calendar_date_errors(0, 13, 1) == [
        "year must be between 1 and 9999, got 0",
        "month must be between 1 and 12, got 13",
    ]


def test_parse_calendar_date():
    assert parse_calendar_date("2024-01-05") == CalendarDate(2024, 1, 5)
    assert parse_calendar_date(" 2024-1-5 ") == CalendarDate(2024, 1, 5)
    with pytest.raises(InvalidDate):
        parse_calendar_date("05/01/2024")
    with pytest.raises(InvalidDate):
        parse_calendar_date("")
    with pytest.raises(InvalidDate):
        parse_calendar_date("2023-02-30")


def test_fixed_to_calendar_is_identity_when_day_fits():
    assert fixed_to_calendar(FixedDate(2023, 4, 30)) == CalendarDate(2023, 4, 30)
    assert fixed_to_calendar(FixedDate(2024, 2, 29)) == CalendarDate(2024, 2, 29)
    assert fixed_to_calendar(FixedDate(2024, 12, 30)) == CalendarDate(2024, 12, 30)


def test_fixed_to_calendar_carries_overflow_into_next_month():
    assert fixed_to_calendar(FixedDate(2025, 2, 30)) == CalendarDate(2025, 3, 2)
    assert fixed_to_calendar(FixedDate(2024, 2, 30)) == CalendarDate(2024, 3, 1)
    assert fixed_to_calendar(FixedDate(2023, 2, 29)) == CalendarDate(2023, 3, 1)


def test_add_duration_days_only():
    assert add_duration(CalendarDate(2024, 1, 1), Duration(days=10)) == FixedDate(2024, 1, 10)


def test_add_duration_normalises_days_before_months():
    # 20 + 15 days -> 5th of month 14 -> month 2 of the next year, minus the sentencing day
    fixed = add_duration(CalendarDate(2024, 11, 20), Duration(months=2, days=15))
    assert fixed == FixedDate(2025, 2, 4)


def test_add_duration_borrows_fixed_month_across_year():
    assert add_duration(CalendarDate(2024, 1, 1), Duration(years=3)) == FixedDate(2026, 12, 30)
    assert add_duration(CalendarDate(2024, 12, 1), Duration(months=1)) == FixedDate(2024, 12, 30)


def test_add_duration_can_land_on_day_thirty_of_february():
    fixed = add_duration(CalendarDate(2023, 2, 1), Duration(months=1))
    assert fixed == FixedDate(2023, 2, 30)
    assert fixed_to_calendar(fixed) == CalendarDate(2023, 3, 2)


def test_add_duration_tolerates_large_day_counts():
    assert add_duration(CalendarDate(2024, 1, 1), Duration(days=100)) == FixedDate(2024, 4, 10)
    assert add_duration(CalendarDate(2024, 1, 31), Duration(days=29)) == FixedDate(2024, 2, 29)


def test_subtract_remission_borrows_real_month_lengths():
    assert subtract_remission(CalendarDate(2024, 3, 15), Remission(days=20)) == CalendarDate(2024, 2, 25)
    assert subtract_remission(CalendarDate(2023, 3, 15), Remission(days=20)) == CalendarDate(2023, 2, 24)


def test_subtract_remission_borrows_across_year_end():
    assert subtract_remission(CalendarDate(2024, 1, 5), Remission(days=10)) == CalendarDate(2023, 12, 27)


def test_subtract_remission_wraps_months():
    assert subtract_remission(CalendarDate(2024, 2, 10), Remission(months=3)) == CalendarDate(2023, 11, 11)
    assert subtract_remission(CalendarDate(2024, 3, 10), Remission(months=3)) == CalendarDate(2023, 12, 11)


def test_subtract_remission_years_and_plus_one_day():
    assert subtract_remission(CalendarDate(2026, 12, 30), Remission(years=1)) == CalendarDate(2025, 12, 31)
    assert subtract_remission(CalendarDate(2024, 12, 31), Remission()) == CalendarDate(2025, 1, 1)


def test_subtract_remission_normalises_day_after_month_change():
    # 31 March less one month would be 31 February; the extra day carries into March
    assert subtract_remission(CalendarDate(2024, 3, 31), Remission(months=1)) == CalendarDate(2024, 3, 3)
    assert subtract_remission(CalendarDate(2024, 2, 29), Remission(years=1)) == CalendarDate(2023, 3, 2)
