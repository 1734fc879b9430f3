"""Display strings for dates, durations and remission."""

from __future__ import annotations

from .types import CalendarDate, Duration, Remission

DEFAULT_DATE_FORMAT = "%d/%m/%Y"


def pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_date(value: CalendarDate, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    # strftime leaves years below 1000 unpadded on some platforms.
    return value.to_date().strftime(fmt.replace("%Y", f"{value.year:04d}"))


def format_remission(remission: Remission) -> str:
    # All three units are always shown, even when zero.
    return ", ".join(
        [
            pluralize(remission.years, "year"),
            pluralize(remission.months, "month"),
            pluralize(remission.days, "day"),
        ]
    )


def format_duration(duration: Duration) -> str:
    return " ".join(
        [
            pluralize(duration.years, "year"),
            pluralize(duration.months, "month"),
            pluralize(duration.days, "day"),
        ]
    )
