"""Core types shared by calculator, CLI and API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

FIXED_DAYS_PER_MONTH = 30
FIXED_MONTHS_PER_YEAR = 12
FIXED_DAYS_PER_YEAR = FIXED_DAYS_PER_MONTH * FIXED_MONTHS_PER_YEAR

RemissionTier = Literal[
    "no_remission",
    "days_above_month",
    "perfect_third",
]

EpdPolicy = Literal[
    "equal_lpd",
    "add_one_day",
]


class RemissionInputError(ValueError):
    """Input rejected before any calculation took place."""


class InvalidDate(RemissionInputError):
    """Start date fields do not form a real calendar date."""


class InvalidDurationRange(RemissionInputError):
    """Duration components are negative or outside months 0-11 / days 0-29."""


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A real Gregorian date. Use ``calendar_date()`` to build one from raw parts."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> CalendarDate:
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True)
class FixedDate:
    """Bookkeeping date where every month has 30 days.

    ``day`` may exceed the real length of ``month`` (30 February is fine here);
    convert with ``fixed_to_calendar`` before showing it to anyone.
    """

    year: int
    month: int
    day: int


@dataclass(frozen=True, slots=True)
class Duration:
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def total_fixed_days(self) -> int:
        return self.years * FIXED_DAYS_PER_YEAR + self.months * FIXED_DAYS_PER_MONTH + self.days


@dataclass(frozen=True, slots=True)
class Remission:
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def total_fixed_days(self) -> int:
        return self.years * FIXED_DAYS_PER_YEAR + self.months * FIXED_DAYS_PER_MONTH + self.days

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0


@dataclass(frozen=True, slots=True)
class RemissionCalculationInput:
    sentence_date: CalendarDate
    duration: Duration
    short_sentence_epd_policy: EpdPolicy = "equal_lpd"
    enforce_duration_range: bool = True


@dataclass(frozen=True, slots=True)
class RemissionCalculationResult:
    sentence_date: CalendarDate
    duration: Duration
    lpd: CalendarDate
    remission: Remission
    epd: CalendarDate
    tier: RemissionTier
    trace: tuple[str, ...] = ()
