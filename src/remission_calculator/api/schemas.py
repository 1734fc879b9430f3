"""Pydantic API schemas."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EpdPolicy = Literal[
    "equal_lpd",
    "add_one_day",
]

RemissionTier = Literal[
    "no_remission",
    "days_above_month",
    "perfect_third",
]


class CalculateRemissionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sentence_date: date
    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0, le=11)
    days: int = Field(default=0, ge=0, le=29)

    short_sentence_epd_policy: EpdPolicy | None = None


class DurationOut(BaseModel):
    years: int
    months: int
    days: int


class RemissionOut(BaseModel):
    years: int
    months: int
    days: int


class CalculateRemissionResponse(BaseModel):
    sentence_date: date
    duration: DurationOut
    lpd: date
    remission: RemissionOut
    epd: date
    tier: RemissionTier
    lpd_display: str
    epd_display: str
    remission_display: str
    trace: list[str] = Field(default_factory=list)
