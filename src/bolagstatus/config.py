"""
bolagstatus Configuration

Settings are read from environment variables with a BS_ prefix.

    BS_TIMEZONE             Civil timezone (default Europe/Stockholm)
    BS_LOG_LEVEL            Logging level (default INFO)
    BS_LOG_FORMAT           "json" or "text" (default json)
    BS_HOURS_FILE           Opening hours YAML/JSON (default: bundled file)
    BS_HOLIDAY_COLLISION    "last" or "first" (default last)
    BS_MAX_LOOKAHEAD_DAYS   Next-open-day search bound (default 7)
    BS_TICK_SECONDS         Ticker interval (default 1.0)
    BS_GOOGLE_MAPS_API_KEY  Enables store search when set
    BS_PLACES_TIMEOUT       Store search request timeout in seconds (default 10)
    BS_DOCS_ENABLED         Serve OpenAPI docs (default true)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .calendars import SwedishCalendar
from .engine import DEFAULT_MAX_LOOKAHEAD_DAYS, DEFAULT_TIMEZONE, StatusCalculator
from .exceptions import ConfigurationError
from .hours import load_hours
from .models import CollisionPolicy

ENV_PREFIX = "BS_"


def _get(env: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    value = env.get(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _parse_number(env: Mapping[str, str], name: str, default: str, kind: type):
    raw = _get(env, name, default)
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(
            message=f"{ENV_PREFIX}{name} must be a number, got {raw!r}",
            details={"variable": ENV_PREFIX + name},
        ) from e


@dataclass(frozen=True)
class Settings:
    """Process-wide settings."""
    timezone: str = DEFAULT_TIMEZONE
    log_level: str = "INFO"
    log_format: str = "json"
    hours_file: Optional[str] = None
    holiday_collision: CollisionPolicy = CollisionPolicy.LAST
    max_lookahead_days: int = DEFAULT_MAX_LOOKAHEAD_DAYS
    tick_seconds: float = 1.0
    google_maps_api_key: Optional[str] = None
    places_timeout: float = 10.0
    docs_enabled: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        env = os.environ if env is None else env

        timezone = _get(env, "TIMEZONE", DEFAULT_TIMEZONE)
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(
                message=f"Unknown timezone {timezone!r}",
                details={"variable": ENV_PREFIX + "TIMEZONE"},
            ) from e

        collision = _get(env, "HOLIDAY_COLLISION", CollisionPolicy.LAST.value).lower()
        try:
            holiday_collision = CollisionPolicy(collision)
        except ValueError as e:
            raise ConfigurationError(
                message=f"{ENV_PREFIX}HOLIDAY_COLLISION must be 'last' or 'first', got {collision!r}",
                details={"variable": ENV_PREFIX + "HOLIDAY_COLLISION"},
            ) from e

        log_format = _get(env, "LOG_FORMAT", "json").lower()
        if log_format not in {"json", "text"}:
            raise ConfigurationError(
                message=f"{ENV_PREFIX}LOG_FORMAT must be 'json' or 'text', got {log_format!r}",
                details={"variable": ENV_PREFIX + "LOG_FORMAT"},
            )

        return cls(
            timezone=timezone,
            log_level=_get(env, "LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            hours_file=_get(env, "HOURS_FILE"),
            holiday_collision=holiday_collision,
            max_lookahead_days=_parse_number(
                env, "MAX_LOOKAHEAD_DAYS", str(DEFAULT_MAX_LOOKAHEAD_DAYS), int
            ),
            tick_seconds=_parse_number(env, "TICK_SECONDS", "1.0", float),
            google_maps_api_key=_get(env, "GOOGLE_MAPS_API_KEY"),
            places_timeout=_parse_number(env, "PLACES_TIMEOUT", "10", float),
            docs_enabled=_get(env, "DOCS_ENABLED", "true").lower() == "true",
        )

    @property
    def places_configured(self) -> bool:
        return bool(self.google_maps_api_key)

    def build_calculator(self) -> StatusCalculator:
        """Create a StatusCalculator wired to these settings."""
        return StatusCalculator(
            calendar=SwedishCalendar(collision_policy=self.holiday_collision),
            hours=load_hours(self.hours_file),
            tz=self.timezone,
            max_lookahead_days=self.max_lookahead_days,
        )
