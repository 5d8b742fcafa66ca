"""Store search result models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

MAPS_PLACE_URL = "https://www.google.com/maps/place/?q=place_id:{place_id}"


@dataclass(frozen=True)
class StoreResult:
    """
    A store returned by the place search backend.

    Attributes:
        name: Store display name
        address: Formatted address
        is_open: Open right now, or None when unknown
        opening_hours: Weekly hours, one line per weekday
        place_id: Backend place identifier
    """
    name: str
    address: str
    is_open: Optional[bool]
    opening_hours: tuple[str, ...] = field(default_factory=tuple)
    place_id: str = ""

    @property
    def maps_url(self) -> str:
        return MAPS_PLACE_URL.format(place_id=self.place_id)

    @property
    def headline(self) -> str:
        if self.is_open is None:
            return "?"
        return "JA" if self.is_open else "NEJ"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "address": self.address,
            "is_open": self.is_open,
            "opening_hours": list(self.opening_hours),
            "place_id": self.place_id,
            "maps_url": self.maps_url,
        }
