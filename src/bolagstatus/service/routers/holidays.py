"""Holiday calendar endpoints."""

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException

from bolagstatus.calendars import BaseCalendar
from bolagstatus.service.schemas import HolidayItem, HolidayYearResponse

router = APIRouter(prefix="/holidays", tags=["Holidays"])

# Shared calendar and timezone (set by main.py)
calendar: BaseCalendar = None
tz: ZoneInfo = ZoneInfo("Europe/Stockholm")

MIN_YEAR = 1583  # first full Gregorian year
MAX_YEAR = 9998


def set_calendar(c: BaseCalendar, zone: ZoneInfo):
    global calendar, tz
    calendar = c
    tz = zone


@router.get("/next", response_model=HolidayItem)
async def next_holiday(from_date: Optional[date] = None):
    """
    Next full closing day strictly after `from_date` (default: today in Sweden).
    """
    start = from_date or datetime.now(timezone.utc).astimezone(tz).date()
    upcoming = calendar.get_next_holiday(start)
    if upcoming is None:
        raise HTTPException(status_code=404, detail=f"No holiday after {start.isoformat()}")
    return HolidayItem(**upcoming.to_dict())


@router.get("/{year}", response_model=HolidayYearResponse)
async def holidays_in_year(year: int):
    """All Swedish public holidays of a year, sorted by date."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise HTTPException(
            status_code=422,
            detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
        )
    dated = calendar.dated_holidays(year)
    return HolidayYearResponse(
        year=year,
        count=len(dated),
        holidays=[HolidayItem(**h.to_dict()) for h in dated],
    )
