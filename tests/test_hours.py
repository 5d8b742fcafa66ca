"""
Opening Hours Tests

Validates:
- Bundled hours file matches the built-in table
- Malformed files, missing keys and bad times fail with clear errors
- Schema version compatibility
- Model-level invariants
"""
from __future__ import annotations

import json

import pytest
import yaml

from bolagstatus.exceptions import HoursLoadError, HoursValidationError
from bolagstatus.hours import DEFAULT_HOURS_FILE, HoursTableLoader, load_hours
from bolagstatus.models import DEFAULT_HOURS, ClockTime, DayClass, DayHours, OpeningHoursTable


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def hours_data():
    """Minimal valid hours file contents."""
    return {
        "schema_version": "1.0.0",
        "name": "Testbutik",
        "opening_soon_minutes": 15,
        "weekday": {"opens": "09:00", "closes": "18:00"},
        "saturday": {"opens": "10:00", "closes": "14:00", "extended_closes": "16:00"},
        "sunday": None,
    }


@pytest.fixture
def write_yaml(tmp_path):
    def _write(data, name="hours.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        return path
    return _write


# ============================================================================
# LOADING
# ============================================================================

class TestLoading:

    def test_bundled_file_matches_builtin_table(self) -> None:
        table = load_hours()

        assert DEFAULT_HOURS_FILE.exists()
        assert dict(table.hours) == dict(DEFAULT_HOURS.hours)
        assert table.opening_soon_minutes == DEFAULT_HOURS.opening_soon_minutes
        assert table.name == "Systembolaget standard"

    def test_load_custom_yaml(self, hours_data, write_yaml) -> None:
        table = load_hours(write_yaml(hours_data))

        assert table.name == "Testbutik"
        assert table.opening_soon_minutes == 15
        assert table.for_class(DayClass.WEEKDAY) == DayHours(ClockTime(9), ClockTime(18))
        assert table.for_class(DayClass.SATURDAY).extended_closes == ClockTime(16)
        assert table.for_class(DayClass.SUNDAY) is None

    def test_load_json(self, hours_data, tmp_path) -> None:
        path = tmp_path / "hours.json"
        path.write_text(json.dumps(hours_data), encoding="utf-8")

        table = HoursTableLoader().load(path)

        assert table.name == "Testbutik"

    def test_closed_saturday(self, hours_data, write_yaml) -> None:
        hours_data["saturday"] = None

        table = load_hours(write_yaml(hours_data))

        assert table.has_entry(DayClass.SATURDAY)
        assert table.for_class(DayClass.SATURDAY) is None

    def test_file_not_found(self, tmp_path) -> None:
        with pytest.raises(HoursLoadError) as exc_info:
            load_hours(tmp_path / "missing.yaml")

        assert exc_info.value.code == "BS_HOURS_LOAD_ERROR"

    def test_malformed_yaml(self, tmp_path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("weekday: [opens: 10:00\n", encoding="utf-8")

        with pytest.raises(HoursLoadError):
            load_hours(path)

    def test_non_mapping_content(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 10:00\n- 19:00\n", encoding="utf-8")

        with pytest.raises(HoursLoadError) as exc_info:
            load_hours(path)

        assert "mapping" in exc_info.value.message


# ============================================================================
# VALIDATION
# ============================================================================

class TestValidation:

    def test_missing_weekday(self, hours_data, write_yaml) -> None:
        del hours_data["weekday"]

        with pytest.raises(HoursValidationError) as exc_info:
            load_hours(write_yaml(hours_data))

        assert "weekday" in str(exc_info.value.details["errors"])

    def test_bad_time_format(self, hours_data, write_yaml) -> None:
        hours_data["weekday"]["opens"] = "9am"

        with pytest.raises(HoursValidationError):
            load_hours(write_yaml(hours_data))

    def test_closing_before_opening(self, hours_data, write_yaml) -> None:
        hours_data["weekday"] = {"opens": "19:00", "closes": "10:00"}

        with pytest.raises(HoursValidationError):
            load_hours(write_yaml(hours_data))

    def test_extended_before_closing(self, hours_data, write_yaml) -> None:
        hours_data["saturday"]["extended_closes"] = "13:00"

        with pytest.raises(HoursValidationError):
            load_hours(write_yaml(hours_data))

    def test_sunday_must_be_closed(self, hours_data, write_yaml) -> None:
        hours_data["sunday"] = {"opens": "12:00", "closes": "16:00"}

        with pytest.raises(HoursValidationError):
            load_hours(write_yaml(hours_data))

    def test_negative_soon_window(self, hours_data) -> None:
        hours_data["opening_soon_minutes"] = -5

        with pytest.raises(HoursValidationError):
            HoursTableLoader().load_data(hours_data)

    def test_major_version_mismatch(self, hours_data) -> None:
        hours_data["schema_version"] = "2.0.0"

        with pytest.raises(HoursValidationError) as exc_info:
            HoursTableLoader().load_data(hours_data)

        assert exc_info.value.details["file_version"] == "2.0.0"

    def test_minor_version_accepted(self, hours_data) -> None:
        hours_data["schema_version"] = "1.4.0"

        assert HoursTableLoader().load_data(hours_data).name == "Testbutik"

    def test_version_check_can_be_relaxed(self, hours_data) -> None:
        hours_data["schema_version"] = "2.0.0"

        table = HoursTableLoader(strict_version=False).load_data(hours_data)

        assert table.name == "Testbutik"


# ============================================================================
# MODELS
# ============================================================================

class TestModels:

    def test_clock_time_parse_and_label(self) -> None:
        assert ClockTime.parse("09:05") == ClockTime(9, 5)
        assert ClockTime(9, 5).label == "09:05"
        assert ClockTime(19).minutes == 1140

    def test_clock_time_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            ClockTime(24, 0)

    def test_day_hours_order(self) -> None:
        with pytest.raises(ValueError):
            DayHours(ClockTime(15), ClockTime(10))

    def test_sunday_hours_rejected(self) -> None:
        with pytest.raises(ValueError):
            OpeningHoursTable(hours={DayClass.SUNDAY: DayHours(ClockTime(10), ClockTime(14))})

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_HOURS.hours[DayClass.SUNDAY] = DayHours(ClockTime(10), ClockTime(14))

    def test_describe(self) -> None:
        assert DEFAULT_HOURS.describe() == [
            ("Måndag – Fredag", "10:00 – 19:00"),
            ("Lördag", "10:00 – 15:00"),
            ("Söndag", "Stängt"),
        ]
