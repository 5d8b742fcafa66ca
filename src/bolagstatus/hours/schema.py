"""
bolagstatus Opening Hours Schemas

Pydantic models for validating opening hours YAML/JSON files.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"

_CLOCK_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def check_schema_version(version: str) -> bool:
    """Check that a file's schema version shares our major version."""
    return version.split(".")[0] == SCHEMA_VERSION.split(".")[0]


# =============================================================================
# Schemas
# =============================================================================

class DayHoursSchema(BaseModel):
    """Opening hours of one day class."""
    opens: str
    closes: str
    extended_closes: Optional[str] = None

    @field_validator("opens", "closes", "extended_closes")
    @classmethod
    def validate_clock(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _CLOCK_PATTERN.match(v):
            raise ValueError(f"Expected HH:MM, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_order(self) -> DayHoursSchema:
        if self.opens >= self.closes:
            raise ValueError(f"opens ({self.opens}) must be before closes ({self.closes})")
        if self.extended_closes is not None and self.extended_closes < self.closes:
            raise ValueError("extended_closes cannot be before closes")
        return self


class HoursTableSchema(BaseModel):
    """An opening hours file."""
    schema_version: str = SCHEMA_VERSION
    name: str = "Standard"
    opening_soon_minutes: int = Field(default=30, ge=0, le=24 * 60)
    weekday: Optional[DayHoursSchema]
    saturday: Optional[DayHoursSchema]
    sunday: Optional[DayHoursSchema] = None

    @field_validator("sunday")
    @classmethod
    def sunday_closed(cls, v: Optional[DayHoursSchema]) -> Optional[DayHoursSchema]:
        if v is not None:
            raise ValueError("Sunday must be closed (null)")
        return v


def validate_hours_table(data: dict[str, Any]) -> HoursTableSchema:
    """Validate raw file data against the schema."""
    return HoursTableSchema.model_validate(data)
