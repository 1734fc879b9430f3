"""Remission calculator orchestration."""

from __future__ import annotations

import logging

from .dates import add_duration, fixed_to_calendar, subtract_remission
from .rules import (
    compute_remission,
    validate_discharge_year,
    validate_duration,
    validate_sentence_date,
)
from .types import (
    InvalidDate,
    InvalidDurationRange,
    RemissionCalculationInput,
    RemissionCalculationResult,
)

logger = logging.getLogger(__name__)


def calculate_remission(data: RemissionCalculationInput) -> RemissionCalculationResult:
    errors = validate_sentence_date(data)
    if errors:
        raise InvalidDate("; ".join(errors))

    errors = validate_duration(data) or validate_discharge_year(data)
    if errors:
        raise InvalidDurationRange("; ".join(errors))

    trace: list[str] = []
    duration = data.duration

    fixed_lpd = add_duration(data.sentence_date, duration)
    lpd = fixed_to_calendar(fixed_lpd)
    trace.append(
        f"Added {duration.years}y {duration.months}m {duration.days}d in fixed units and took off the "
        f"sentencing day: fixed {fixed_lpd.year:04d}-{fixed_lpd.month:02d}-{fixed_lpd.day:02d}"
    )
    if (lpd.year, lpd.month, lpd.day) != (fixed_lpd.year, fixed_lpd.month, fixed_lpd.day):
        trace.append(f"Carried fixed-day overflow into the real calendar: LPD {lpd.isoformat()}")
    else:
        trace.append(f"LPD {lpd.isoformat()}")

    remission, tier = compute_remission(duration)
    trace.append(
        f"Sentence is {duration.total_fixed_days} fixed days ({tier}): remission "
        f"{remission.years}y {remission.months}m {remission.days}d"
    )

    if tier == "no_remission" and data.short_sentence_epd_policy == "equal_lpd":
        epd = lpd
        trace.append("Short sentence: EPD equals LPD")
    else:
        epd = subtract_remission(lpd, remission)
        trace.append(f"Subtracted remission from LPD and added one day: EPD {epd.isoformat()}")

    logger.debug(
        "Remission for %s + %s: lpd=%s remission=%s epd=%s",
        data.sentence_date.isoformat(),
        duration,
        lpd.isoformat(),
        remission,
        epd.isoformat(),
    )

    return RemissionCalculationResult(
        sentence_date=data.sentence_date,
        duration=duration,
        lpd=lpd,
        remission=remission,
        epd=epd,
        tier=tier,
        trace=tuple(trace),
    )
