"""Deterministic remission rules from the gold-standard guide."""

from __future__ import annotations

from datetime import MAXYEAR

from .dates import add_duration, calendar_date_errors
from .types import (
    FIXED_DAYS_PER_MONTH,
    FIXED_MONTHS_PER_YEAR,
    Duration,
    Remission,
    RemissionCalculationInput,
    RemissionTier,
)

NO_REMISSION_MAX_DAYS = 30
DAYS_ABOVE_MONTH_MAX_DAYS = 44

MAX_DURATION_MONTHS = 11
MAX_DURATION_DAYS = 29


def validate_sentence_date(data: RemissionCalculationInput) -> list[str]:
    start = data.sentence_date
    return [f"sentence_date {error}" for error in calendar_date_errors(start.year, start.month, start.day)]


def validate_discharge_year(data: RemissionCalculationInput) -> list[str]:
    # A fixed LPD never has day 31 and December has 31 days, so the real LPD keeps
    # the fixed year and EPD is at most one day after it.
    lpd_year = add_duration(data.sentence_date, data.duration).year
    if lpd_year > MAXYEAR:
        return [f"sentence ends in year {lpd_year}, after the last supported year {MAXYEAR}"]
    return []


def validate_duration(data: RemissionCalculationInput) -> list[str]:
    errors: list[str] = []
    duration = data.duration

    if duration.years < 0 or duration.months < 0 or duration.days < 0:
        errors.append("duration values cannot be negative")

    if data.enforce_duration_range:
        if duration.months > MAX_DURATION_MONTHS:
            errors.append(f"months must be between 0 and {MAX_DURATION_MONTHS}")
        if duration.days > MAX_DURATION_DAYS:
            errors.append(f"days must be between 0 and {MAX_DURATION_DAYS}")

    return errors


def remission_tier(total_fixed_days: int) -> RemissionTier:
    if total_fixed_days <= NO_REMISSION_MAX_DAYS:
        return "no_remission"
    if total_fixed_days <= DAYS_ABOVE_MONTH_MAX_DAYS:
        return "days_above_month"
    return "perfect_third"


def round_half_up(numerator: int, denominator: int) -> int:
    """Round a non-negative fraction: .5 and above up, below .5 down."""
    whole, rest = divmod(numerator, denominator)
    return whole + 1 if rest * 2 >= denominator else whole


def compute_perfect_third(years: int, months: int, days: int) -> Remission:
    """One third of the sentence, unit by unit.

    Whole thirds of each unit are granted directly and the leftover is
    down-converted into the next smaller unit. Only the final day figure is
    rounded. Months are never carried into years.
    """
    rem_years = years // 3
    months += (years - rem_years * 3) * FIXED_MONTHS_PER_YEAR

    rem_months = months // 3
    days += (months - rem_months * 3) * FIXED_DAYS_PER_MONTH

    rem_days = round_half_up(days, 3)

    while rem_days >= FIXED_DAYS_PER_MONTH:
        rem_days -= FIXED_DAYS_PER_MONTH
        rem_months += 1

    return Remission(rem_years, rem_months, rem_days)


def compute_remission(duration: Duration) -> tuple[Remission, RemissionTier]:
    total = duration.total_fixed_days
    tier = remission_tier(total)

    if tier == "no_remission":
        return Remission(), tier
    if tier == "days_above_month":
        return Remission(days=total - NO_REMISSION_MAX_DAYS), tier
    return compute_perfect_third(duration.years, duration.months, duration.days), tier
