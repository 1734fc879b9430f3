"""FastAPI entrypoint for the remission calculator."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException

from remission_calculator.api.schemas import (
    CalculateRemissionRequest,
    CalculateRemissionResponse,
    DurationOut,
    RemissionOut,
)
from remission_calculator.config import Settings, get_settings
from remission_calculator.core.calculator import calculate_remission
from remission_calculator.core.formatting import format_date, format_remission
from remission_calculator.core.types import (
    CalendarDate,
    Duration,
    RemissionCalculationInput,
    RemissionCalculationResult,
    RemissionInputError,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Remission Calculator API", version="0.1.0")


def to_response_payload(result: RemissionCalculationResult, settings: Settings) -> CalculateRemissionResponse:
    fmt = settings.display_date_format
    return CalculateRemissionResponse(
        sentence_date=result.sentence_date.to_date(),
        duration=DurationOut(**asdict(result.duration)),
        lpd=result.lpd.to_date(),
        remission=RemissionOut(**asdict(result.remission)),
        epd=result.epd.to_date(),
        tier=result.tier,
        lpd_display=format_date(result.lpd, fmt),
        epd_display=format_date(result.epd, fmt),
        remission_display=format_remission(result.remission),
        trace=list(result.trace),
    )


def calculate_from_request(req: CalculateRemissionRequest) -> CalculateRemissionResponse:
    settings = get_settings()

    model = RemissionCalculationInput(
        sentence_date=CalendarDate.from_date(req.sentence_date),
        duration=Duration(years=req.years, months=req.months, days=req.days),
        short_sentence_epd_policy=req.short_sentence_epd_policy or settings.short_sentence_epd_policy,
        enforce_duration_range=settings.enforce_duration_range,
    )

    try:
        result = calculate_remission(model)
    except RemissionInputError as exc:
        logger.warning("Rejected remission request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return to_response_payload(result, settings)


@app.get("/v1/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/v1/calculate_remission", response_model=CalculateRemissionResponse)
def calculate_remission_endpoint(req: CalculateRemissionRequest) -> CalculateRemissionResponse:
    return calculate_from_request(req)
