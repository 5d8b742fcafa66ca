"""
bolagstatus Opening Hours Loader

Loads and validates opening hours tables from YAML or JSON files.

Converts Pydantic schema models to bolagstatus domain models.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import HoursLoadError, HoursValidationError
from ..models import ClockTime, DayClass, DayHours, OpeningHoursTable
from .schema import (
    SCHEMA_VERSION,
    DayHoursSchema,
    HoursTableSchema,
    check_schema_version,
    validate_hours_table,
)

DEFAULT_HOURS_FILE = Path(__file__).parent / "default.yaml"


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_day_hours(schema: Optional[DayHoursSchema]) -> Optional[DayHours]:
    """Convert DayHoursSchema to DayHours model."""
    if schema is None:
        return None
    return DayHours(
        opens=ClockTime.parse(schema.opens),
        closes=ClockTime.parse(schema.closes),
        extended_closes=(
            ClockTime.parse(schema.extended_closes)
            if schema.extended_closes else None
        ),
    )


def _convert_hours_table(schema: HoursTableSchema) -> OpeningHoursTable:
    """Convert HoursTableSchema to OpeningHoursTable model."""
    return OpeningHoursTable(
        hours={
            DayClass.WEEKDAY: _convert_day_hours(schema.weekday),
            DayClass.SATURDAY: _convert_day_hours(schema.saturday),
            DayClass.SUNDAY: None,
        },
        opening_soon_minutes=schema.opening_soon_minutes,
        name=schema.name,
    )


# =============================================================================
# Loader
# =============================================================================

class HoursTableLoader:
    """
    Loads opening hours tables from YAML or JSON files.

    Usage:
        loader = HoursTableLoader()
        table = loader.load("path/to/hours.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject files with incompatible schema versions
        """
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> OpeningHoursTable:
        """
        Load an opening hours table from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Loaded OpeningHoursTable

        Raises:
            HoursLoadError: If file cannot be read or parsed
            HoursValidationError: If validation fails or the version is incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise HoursLoadError(
                message=f"Failed to load opening hours: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise HoursLoadError(
                message="Opening hours file must contain a mapping",
                details={"path": str(path)},
            )

        return self.load_data(data, source=str(path))

    def load_data(self, data: dict[str, Any], source: str = "<data>") -> OpeningHoursTable:
        """Validate and convert already-parsed data."""
        file_version = str(data.get("schema_version", SCHEMA_VERSION))
        if self.strict_version and not check_schema_version(file_version):
            raise HoursValidationError(
                message=f"Schema version mismatch: file has {file_version}, expected {SCHEMA_VERSION}",
                details={
                    "file_version": file_version,
                    "expected_version": SCHEMA_VERSION,
                    "path": source,
                },
            )

        try:
            schema = validate_hours_table(data)
        except ValidationError as e:
            raise HoursValidationError(
                message=f"Opening hours validation failed: {e.error_count()} errors",
                details={
                    "errors": e.errors(include_url=False, include_context=False),
                    "path": source,
                },
            ) from e

        return _convert_hours_table(schema)

    def load_default(self) -> OpeningHoursTable:
        """Load the bundled standard hours."""
        return self.load(DEFAULT_HOURS_FILE)

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


def load_hours(path: Optional[Union[str, Path]] = None) -> OpeningHoursTable:
    """Load an opening hours table, or the bundled standard hours."""
    loader = HoursTableLoader()
    if path is None:
        return loader.load_default()
    return loader.load(path)
