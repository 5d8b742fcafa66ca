"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Optional


class CountdownParts(BaseModel):
    """Countdown split into display units."""
    hours: int
    minutes: int
    seconds: int


class StatusResponse(BaseModel):
    """Opening status at one instant."""
    state: str  # open|closed|soon
    headline: str  # JA|NEJ|SNART
    is_open: bool
    message: str

    # Countdown
    countdown_seconds: int
    countdown: CountdownParts
    countdown_display: str
    countdown_label: str
    countdown_target: str

    # Display
    current_time: str
    current_date: str
    today_hours: str

    # Holiday
    holiday_name: Optional[str] = None
    is_holiday: bool
    larger_stores_may_be_open: bool

    now: str


class HolidayItem(BaseModel):
    """A holiday on a concrete date."""
    date: str
    name: str
    closed: bool


class HolidayYearResponse(BaseModel):
    """All holidays of one year."""
    year: int
    count: int
    holidays: list[HolidayItem]


class WeeklyHoursRow(BaseModel):
    label: str
    hours: str


class HoursResponse(BaseModel):
    """Standard weekly opening hours."""
    name: str
    opening_soon_minutes: int
    rows: list[WeeklyHoursRow]


class StoreItem(BaseModel):
    """A store from the place search backend."""
    name: str
    address: str
    is_open: Optional[bool] = None
    headline: str
    opening_hours: list[str]
    place_id: str
    maps_url: str


class StoreSearchResponse(BaseModel):
    query: str
    count: int
    stores: list[StoreItem]


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str


class ReadyResponse(BaseModel):
    ready: bool
    timezone: str
    hours_table: str
    store_search_configured: bool
