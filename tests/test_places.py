"""
Store Search Tests

The place search backend is replaced by a mocked requests session.
"""
from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock

import pytest
import requests

from bolagstatus.exceptions import (
    PlaceSearchMalformedResponseError,
    PlaceSearchNoResultsError,
    PlaceSearchNotConfiguredError,
    PlaceSearchRequestError,
)
from bolagstatus.places import PLACES_SEARCH_URL, PlaceSearchClient, StoreResult, parse_open_now

WEEK = (
    "måndag: 10:00–19:00",
    "tisdag: 10:00–19:00",
    "onsdag: 10:00–19:00",
    "torsdag: 10:00–19:00",
    "fredag: 10:00–19:00",
    "lördag: 10:00–15:00",
    "söndag: Stängt",
)


def make_place(name="Systembolaget Nordstan", open_now=True, weekday_text=WEEK, place_id="abc123"):
    opening = {"weekdayDescriptions": list(weekday_text)}
    if open_now is not None:
        opening["openNow"] = open_now
    return {
        "id": place_id,
        "displayName": {"text": name, "languageCode": "sv"},
        "formattedAddress": "Nordstadstorget 1, Göteborg",
        "currentOpeningHours": opening,
    }


def make_session(payload=None, status_code=200, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} error")
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    session = MagicMock()
    session.post.return_value = response
    return session


# =============================================================================
# Weekly Hours Parsing
# =============================================================================

class TestParseOpenNow:

    def test_open_on_monday(self) -> None:
        assert parse_open_now(WEEK, datetime(2025, 10, 13, 12, 0)) is True

    def test_closed_after_hours(self) -> None:
        assert parse_open_now(WEEK, datetime(2025, 10, 13, 19, 0)) is False

    def test_closed_word(self) -> None:
        assert parse_open_now(WEEK, datetime(2025, 10, 19, 12, 0)) is False

    def test_dotted_times(self) -> None:
        assert parse_open_now(["lördag: 10.00 - 15.00"], datetime(2025, 10, 18, 14, 59)) is True

    def test_unknown_day(self) -> None:
        assert parse_open_now(["måndag: 10:00–19:00"], datetime(2025, 10, 14, 12, 0)) is None

    def test_unparseable_line(self) -> None:
        assert parse_open_now(["måndag: enligt överenskommelse"], datetime(2025, 10, 13, 12, 0)) is None

    def test_empty(self) -> None:
        assert parse_open_now([], datetime(2025, 10, 13, 12, 0)) is None


# =============================================================================
# Client
# =============================================================================

class TestSearch:

    def test_request_shape(self) -> None:
        session = make_session({"places": [make_place()]})
        client = PlaceSearchClient(api_key="key", session=session, timeout=3.0)

        client.search("Göteborg")

        args, kwargs = session.post.call_args
        assert args[0] == PLACES_SEARCH_URL
        assert kwargs["json"] == {
            "textQuery": "Systembolaget Göteborg",
            "languageCode": "sv",
            "maxResultCount": 5,
        }
        assert kwargs["headers"]["X-Goog-Api-Key"] == "key"
        assert "places.currentOpeningHours" in kwargs["headers"]["X-Goog-FieldMask"]
        assert kwargs["timeout"] == 3.0

    def test_results(self) -> None:
        session = make_session({"places": [make_place(), make_place("Systembolaget Avenyn", open_now=False)]})
        client = PlaceSearchClient(api_key="key", session=session)

        results = client.search("Göteborg")

        assert [r.name for r in results] == ["Systembolaget Nordstan", "Systembolaget Avenyn"]
        assert results[0].is_open is True
        assert results[0].headline == "JA"
        assert results[1].headline == "NEJ"
        assert results[0].opening_hours == WEEK
        assert results[0].maps_url.endswith("place_id:abc123")

    def test_other_businesses_filtered_out(self) -> None:
        session = make_session({"places": [make_place("ICA Maxi"), make_place()]})
        client = PlaceSearchClient(api_key="key", session=session)

        results = client.search("Göteborg")

        assert len(results) == 1

    def test_results_capped(self) -> None:
        places = [make_place(f"Systembolaget {i}", place_id=str(i)) for i in range(8)]
        client = PlaceSearchClient(api_key="key", session=make_session({"places": places}))

        assert len(client.search("Stockholm")) == 5

    def test_falls_back_to_weekly_text(self) -> None:
        session = make_session({"places": [make_place(open_now=None)]})
        client = PlaceSearchClient(api_key="key", session=session)

        monday_noon = client.search("Göteborg", now=datetime(2025, 10, 13, 12, 0))
        sunday_noon = client.search("Göteborg", now=datetime(2025, 10, 19, 12, 0))

        assert monday_noon[0].is_open is True
        assert sunday_noon[0].is_open is False

    def test_unknown_open_state(self) -> None:
        session = make_session({"places": [make_place(open_now=None, weekday_text=())]})
        client = PlaceSearchClient(api_key="key", session=session)

        result = client.search("Kiruna")[0]

        assert result.is_open is None
        assert result.headline == "?"

    def test_blank_query_returns_nothing(self) -> None:
        session = make_session()
        client = PlaceSearchClient(api_key="key", session=session)

        assert client.search("   ") == []
        session.post.assert_not_called()


class TestSearchErrors:

    def test_not_configured(self) -> None:
        client = PlaceSearchClient(session=make_session())

        with pytest.raises(PlaceSearchNotConfiguredError) as exc_info:
            client.search("Göteborg")

        assert not client.configured
        assert exc_info.value.message == "Google Maps API-nyckel saknas. Kontakta administratören."
        assert exc_info.value.query == "Göteborg"

    def test_no_places(self) -> None:
        client = PlaceSearchClient(api_key="key", session=make_session({}))

        with pytest.raises(PlaceSearchNoResultsError):
            client.search("Ingenstans")

    def test_only_other_businesses(self) -> None:
        client = PlaceSearchClient(api_key="key", session=make_session({"places": [make_place("Pressbyrån")]}))

        with pytest.raises(PlaceSearchNoResultsError):
            client.search("Ingenstans")

    def test_http_error(self) -> None:
        client = PlaceSearchClient(api_key="key", session=make_session({}, status_code=403))

        with pytest.raises(PlaceSearchRequestError) as exc_info:
            client.search("Göteborg")

        assert exc_info.value.details["status_code"] == 403
        assert exc_info.value.code == "BS_PLACE_SEARCH_REQUEST_FAILED"

    def test_timeout(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.exceptions.Timeout("timed out")
        client = PlaceSearchClient(api_key="key", session=session)

        with pytest.raises(PlaceSearchRequestError) as exc_info:
            client.search("Göteborg")

        assert "status_code" not in exc_info.value.details

    def test_invalid_json(self) -> None:
        client = PlaceSearchClient(api_key="key", session=make_session(json_error=True))

        with pytest.raises(PlaceSearchMalformedResponseError):
            client.search("Göteborg")

    def test_places_not_a_list(self) -> None:
        client = PlaceSearchClient(api_key="key", session=make_session({"places": "nope"}))

        with pytest.raises(PlaceSearchMalformedResponseError):
            client.search("Göteborg")

    def test_payload_not_an_object(self) -> None:
        client = PlaceSearchClient(api_key="key", session=make_session([1, 2]))

        with pytest.raises(PlaceSearchMalformedResponseError):
            client.search("Göteborg")


class TestStoreResult:

    def test_to_dict(self) -> None:
        store = StoreResult("Systembolaget Nordstan", "Nordstadstorget 1", True, ("måndag: 10–19",), "p1")

        assert store.to_dict() == {
            "name": "Systembolaget Nordstan",
            "address": "Nordstadstorget 1",
            "is_open": True,
            "opening_hours": ["måndag: 10–19"],
            "place_id": "p1",
            "maps_url": "https://www.google.com/maps/place/?q=place_id:p1",
        }
