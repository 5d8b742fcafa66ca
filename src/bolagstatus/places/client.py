"""
Place search client for the Google Places Text Search API.

Looks up Systembolaget stores by free text and reports whether each one is
open. This data source is independent of the status calculator: the open
flag comes from the backend, or from parsing its weekly hours text.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

import requests

from ..exceptions import (
    PlaceSearchMalformedResponseError,
    PlaceSearchNoResultsError,
    PlaceSearchNotConfiguredError,
    PlaceSearchRequestError,
)
from .hours_parser import parse_open_now
from .models import StoreResult

logger = logging.getLogger(__name__)

PLACES_SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"

FIELD_MASK = ",".join([
    "places.id",
    "places.displayName",
    "places.formattedAddress",
    "places.currentOpeningHours",
])

STORE_NAME = "systembolaget"

MSG_NOT_CONFIGURED = "Google Maps API-nyckel saknas. Kontakta administratören."
MSG_NO_RESULTS = "Inga Systembolaget-butiker hittades. Prova ett annat sökord."
MSG_REQUEST_FAILED = "Ett fel uppstod vid sökning. Försök igen."
UNKNOWN_STORE = "Okänd butik"


class PlaceSearchClient:
    """
    Client for store lookups.

    Parameters
    ----------
    api_key : str, optional
        Google Maps API key. Searches raise PlaceSearchNotConfiguredError without one.
    timeout : float
        Request timeout in seconds.
    tz : str
        Timezone used when parsing weekly hours text.
    max_results : int
        Upper bound on results requested from the backend.
    session : requests.Session, optional
        Session to reuse; one is created if not given.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        tz: str = "Europe/Stockholm",
        max_results: int = 5,
        session: Optional[requests.Session] = None,
        base_url: str = PLACES_SEARCH_URL,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.tz = ZoneInfo(tz)
        self.max_results = max_results
        self.base_url = base_url
        self.session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def search(self, query: str, now: Optional[datetime] = None) -> list[StoreResult]:
        """
        Search for stores matching a free-text query.

        Args:
            query: Place or store name, e.g. "Göteborg"
            now: Instant used for the weekly-hours fallback (defaults to now)

        Returns:
            Up to `max_results` stores; empty for a blank query

        Raises:
            PlaceSearchNotConfiguredError: No API key
            PlaceSearchNoResultsError: Nothing matched
            PlaceSearchRequestError: Transport or HTTP failure
            PlaceSearchMalformedResponseError: Unexpected payload
        """
        query = (query or "").strip()
        if not query:
            return []

        if not self.configured:
            raise PlaceSearchNotConfiguredError(message=MSG_NOT_CONFIGURED, query=query)

        payload = self._post(query)
        places = self._extract_places(payload, query)

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            local_now = now.replace(tzinfo=self.tz)
        else:
            local_now = now.astimezone(self.tz)
        stores = [
            self._to_store(place, local_now)
            for place in places
            if STORE_NAME in self._display_name(place).lower()
        ]
        if not stores:
            raise PlaceSearchNoResultsError(message=MSG_NO_RESULTS, query=query)

        return stores[: self.max_results]

    def _post(self, query: str) -> Any:
        body = {
            "textQuery": f"Systembolaget {query}",
            "languageCode": "sv",
            "maxResultCount": self.max_results,
        }
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": FIELD_MASK,
        }

        response = None
        try:
            response = self.session.post(
                self.base_url, json=body, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Place search request failed: {e}", extra={"query": query})
            details: dict[str, Any] = {"error": str(e)}
            if response is not None:
                details["status_code"] = response.status_code
            raise PlaceSearchRequestError(
                message=MSG_REQUEST_FAILED, details=details, query=query
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Place search returned invalid JSON: {e}", extra={"query": query})
            raise PlaceSearchMalformedResponseError(
                message=MSG_REQUEST_FAILED, details={"error": str(e)}, query=query
            ) from e

    def _extract_places(self, payload: Any, query: str) -> list[dict[str, Any]]:
        if not isinstance(payload, dict):
            raise PlaceSearchMalformedResponseError(
                message=MSG_REQUEST_FAILED,
                details={"error": "response is not an object"},
                query=query,
            )

        places = payload.get("places", [])
        if not isinstance(places, list) or not all(isinstance(p, dict) for p in places):
            raise PlaceSearchMalformedResponseError(
                message=MSG_REQUEST_FAILED,
                details={"error": "'places' is not a list of objects"},
                query=query,
            )
        if not places:
            raise PlaceSearchNoResultsError(message=MSG_NO_RESULTS, query=query)
        return places

    @staticmethod
    def _display_name(place: dict[str, Any]) -> str:
        name = place.get("displayName")
        if isinstance(name, dict):
            return name.get("text") or ""
        return name or ""

    def _to_store(self, place: dict[str, Any], local_now: datetime) -> StoreResult:
        opening = place.get("currentOpeningHours") or {}
        weekday_text = tuple(opening.get("weekdayDescriptions") or ())

        is_open = opening.get("openNow")
        if not isinstance(is_open, bool):
            is_open = parse_open_now(weekday_text, local_now) if weekday_text else None

        return StoreResult(
            name=self._display_name(place) or UNKNOWN_STORE,
            address=place.get("formattedAddress") or "",
            is_open=is_open,
            opening_hours=weekday_text,
            place_id=place.get("id") or "",
        )
