"""Fixed-unit and real calendar date arithmetic.

Sentences are added in fixed units (1 month = 30 days, 1 year = 12 months)
and only then mapped onto the real calendar. Remission is taken off the
resulting real date using actual month lengths, so leap years matter there
and nowhere else.
"""

from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR

from .types import (
    FIXED_DAYS_PER_MONTH,
    FIXED_MONTHS_PER_YEAR,
    CalendarDate,
    Duration,
    FixedDate,
    InvalidDate,
    Remission,
)

ISO_DATE_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*$")

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_calendar_month(month: int, year: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def calendar_date_errors(year: int, month: int, day: int) -> list[str]:
    errors: list[str] = []

    if not (MINYEAR <= year <= MAXYEAR):
        errors.append(f"year must be between {MINYEAR} and {MAXYEAR}, got {year}")
    if not (1 <= month <= 12):
        errors.append(f"month must be between 1 and 12, got {month}")
    else:
        length = days_in_calendar_month(month, year)
        if not (1 <= day <= length):
            errors.append(f"day must be between 1 and {length} for {year:04d}-{month:02d}, got {day}")

    return errors


def calendar_date(year: int, month: int, day: int) -> CalendarDate:
    """Build a CalendarDate, raising InvalidDate if the parts are not a real date."""
    errors = calendar_date_errors(year, month, day)
    if errors:
        raise InvalidDate("; ".join(errors))
    return CalendarDate(year, month, day)


def parse_calendar_date(text: str) -> CalendarDate:
    match = ISO_DATE_RE.match(text or "")
    if not match:
        raise InvalidDate(f"expected a date as YYYY-MM-DD, got {text!r}")
    year, month, day = (int(part) for part in match.groups())
    return calendar_date(year, month, day)


def fixed_to_calendar(fixed: FixedDate) -> CalendarDate:
    """Carry any day overflow forward into the following real months."""
    year, month, day = fixed.year, fixed.month, fixed.day

    while day > days_in_calendar_month(month, year):
        day -= days_in_calendar_month(month, year)
        month += 1
        if month > 12:
            month = 1
            year += 1

    return CalendarDate(year, month, day)


def add_duration(start: CalendarDate, duration: Duration) -> FixedDate:
    """Fixed-unit LPD candidate: start + duration - 1 day.

    Day overflow is normalised before month overflow. The sentencing day
    counts as served, so one day comes off at the end, borrowing a fixed
    30-day month when that empties the day field.
    """
    year = start.year + duration.years
    month = start.month + duration.months
    day = start.day + duration.days

    while day > FIXED_DAYS_PER_MONTH:
        day -= FIXED_DAYS_PER_MONTH
        month += 1

    while month > FIXED_MONTHS_PER_YEAR:
        month -= FIXED_MONTHS_PER_YEAR
        year += 1

    day -= 1
    if day <= 0:
        month -= 1
        if month <= 0:
            month += FIXED_MONTHS_PER_YEAR
            year -= 1
        day += FIXED_DAYS_PER_MONTH

    return FixedDate(year, month, day)


def subtract_remission(lpd: CalendarDate, remission: Remission) -> CalendarDate:
    """EPD = (LPD - remission) + 1 day, borrowing real month lengths."""
    year, month, day = lpd.year, lpd.month, lpd.day

    day -= remission.days
    while day <= 0:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_calendar_month(month, year)

    month -= remission.months
    while month <= 0:
        month += 12
        year -= 1

    year -= remission.years

    day += 1
    while day > days_in_calendar_month(month, year):
        day -= days_in_calendar_month(month, year)
        month += 1
        if month > 12:
            month = 1
            year += 1

    return CalendarDate(year, month, day)
