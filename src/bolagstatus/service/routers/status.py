"""Opening status endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException

from bolagstatus.engine import StatusCalculator
from bolagstatus.exceptions import StatusInvariantError
from bolagstatus.labels import HEADLINES
from bolagstatus.service.schemas import (
    CountdownParts,
    HoursResponse,
    StatusResponse,
    WeeklyHoursRow,
)

router = APIRouter(tags=["Status"])

# Shared calculator instance (set by main.py)
calculator: StatusCalculator = None


def set_calculator(c: StatusCalculator):
    global calculator
    calculator = c


def to_status_response(snapshot) -> StatusResponse:
    data = snapshot.to_dict()
    return StatusResponse(
        state=data["state"],
        headline=HEADLINES[snapshot.state],
        is_open=data["is_open"],
        message=data["message"],
        countdown_seconds=data["countdown_seconds"],
        countdown=CountdownParts(**data["countdown"]),
        countdown_display=data["countdown_display"],
        countdown_label=data["countdown_label"],
        countdown_target=data["countdown_target"],
        current_time=data["current_time"],
        current_date=data["current_date"],
        today_hours=data["today_hours"],
        holiday_name=data["holiday_name"],
        is_holiday=data["is_holiday"],
        larger_stores_may_be_open=data["larger_stores_may_be_open"],
        now=data["now"],
    )


@router.get("/status", response_model=StatusResponse)
async def get_status(at: Optional[datetime] = None):
    """
    Is Systembolaget open right now?

    Optionally pass `at` (ISO 8601) to evaluate another instant. Naive
    timestamps are read as Swedish wall-clock time.
    """
    try:
        snapshot = calculator.evaluate(at)
    except StatusInvariantError as e:
        raise HTTPException(status_code=500, detail=e.to_dict())
    return to_status_response(snapshot)


@router.get("/hours", response_model=HoursResponse)
async def get_hours():
    """Standard weekly opening hours."""
    table = calculator.hours
    return HoursResponse(
        name=table.name,
        opening_soon_minutes=table.opening_soon_minutes,
        rows=[WeeklyHoursRow(label=label, hours=hours) for label, hours in table.describe()],
    )
