#!/usr/bin/env python3
"""
bolagstatus CLI

Command-line interface answering "Is Systembolaget open right now?".

Usage:
    bolagstatus status [--at 2025-12-24T11:00] [--json]
    bolagstatus watch [--ticks 10]
    bolagstatus holidays [--year 2025] [--next]
    bolagstatus hours
    bolagstatus stores Göteborg [--json]
    bolagstatus serve [--host 0.0.0.0] [--port 8000]

Exit Codes:
    0   OK
    1   USAGE           - No command given
    10  INPUT_INVALID   - Invalid argument value
    11  CONFIG_ERROR    - Environment or hours file could not be loaded
    12  SEARCH_FAILED   - Store search failed (not configured, request, response)
    13  NO_RESULTS      - Store search found nothing
    20  INTERNAL_ERROR  - Unexpected internal error
"""

import argparse
import json
import sys
from datetime import datetime

from bolagstatus import __version__
from bolagstatus.config import Settings
from bolagstatus.engine import StatusTicker
from bolagstatus.exceptions import (
    BolagStatusError,
    ConfigurationError,
    HoursLoadError,
    HoursValidationError,
    PlaceSearchError,
    PlaceSearchNoResultsError,
)
from bolagstatus.labels import HEADLINES
from bolagstatus.log import configure_logging
from bolagstatus.models import StatusSnapshot, StoreState
from bolagstatus.places import PlaceSearchClient


class ExitCode:
    """Deterministic exit codes for scripting."""
    OK = 0
    USAGE = 1
    INPUT_INVALID = 10
    CONFIG_ERROR = 11
    SEARCH_FAILED = 12
    NO_RESULTS = 13
    INTERNAL_ERROR = 20


# ============================================================================
# OUTPUT HELPERS
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        cls.BLUE = ''
        cls.CYAN = ''
        cls.GREEN = ''
        cls.YELLOW = ''
        cls.RED = ''
        cls.BOLD = ''
        cls.END = ''


STATE_COLORS = {
    StoreState.OPEN: "GREEN",
    StoreState.OPENING_SOON: "YELLOW",
    StoreState.CLOSED: "RED",
}


def print_header(text: str):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}[ERROR] {text}{Colors.END}", file=sys.stderr)


def print_kv(key: str, value: str, indent: int = 0):
    spaces = "  " * indent
    print(f"{spaces}{Colors.BOLD}{key}:{Colors.END} {value}")


def print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def print_snapshot(snapshot: StatusSnapshot):
    color = getattr(Colors, STATE_COLORS[snapshot.state])
    print(f"{Colors.BOLD}{color}{HEADLINES[snapshot.state]}{Colors.END}  {snapshot.message}")
    if snapshot.is_holiday and snapshot.holiday_name:
        print_kv("Idag", snapshot.holiday_name)
    print_kv("Datum", f"{snapshot.current_date_label} {snapshot.current_time_label}")
    print_kv("Dagens öppettider", snapshot.today_hours_label)
    print_kv(snapshot.countdown_label, snapshot.countdown_display)
    if snapshot.larger_stores_may_be_open:
        print_kv("Obs", "Större butiker kan fortfarande ha öppet")


# ============================================================================
# COMMANDS
# ============================================================================

def _parse_at(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid ISO timestamp: {value!r}")


def cmd_status(args, settings: Settings) -> int:
    """Show the current opening status."""
    calculator = settings.build_calculator()
    snapshot = calculator.evaluate(args.at)
    if args.json:
        print_json(snapshot.to_dict())
    else:
        print_snapshot(snapshot)
    return ExitCode.OK


def cmd_watch(args, settings: Settings) -> int:
    """Re-evaluate the status every tick until interrupted."""
    calculator = settings.build_calculator()

    def render(snapshot: StatusSnapshot):
        print(
            f"{snapshot.current_time_label} {HEADLINES[snapshot.state]:<5} "
            f"{snapshot.countdown_display}  {snapshot.countdown_label}",
            flush=True,
        )

    ticker = StatusTicker(
        calculator,
        on_snapshot=render,
        interval=args.interval or settings.tick_seconds,
    )
    try:
        ticker.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        ticker.stop()
    return ExitCode.OK


def cmd_holidays(args, settings: Settings) -> int:
    """List holidays of a year, or the next closing day."""
    calculator = settings.build_calculator()
    today = calculator.localize(datetime.now().astimezone()).date()

    if args.next:
        upcoming = calculator.calendar.get_next_holiday(today)
        if upcoming is None:
            print_error("No upcoming holiday found")
            return ExitCode.INPUT_INVALID
        if args.json:
            print_json(upcoming.to_dict())
        else:
            print_kv(upcoming.date.isoformat(), upcoming.holiday.name)
        return ExitCode.OK

    year = args.year or today.year
    dated = calculator.calendar.dated_holidays(year)
    if args.json:
        print_json([h.to_dict() for h in dated])
        return ExitCode.OK

    print_header(f"Helgdagar {year}")
    for h in dated:
        marker = "" if h.holiday.closed else " (kortare öppettider)"
        print_kv(h.date.isoformat(), f"{h.holiday.name}{marker}", indent=1)
    return ExitCode.OK


def cmd_hours(args, settings: Settings) -> int:
    """Show standard weekly opening hours."""
    calculator = settings.build_calculator()
    print_header("Vanliga öppettider")
    for label, hours in calculator.hours.describe():
        print_kv(label, hours, indent=1)
    return ExitCode.OK


def cmd_stores(args, settings: Settings) -> int:
    """Search for stores."""
    client = PlaceSearchClient(
        api_key=settings.google_maps_api_key,
        timeout=settings.places_timeout,
        tz=settings.timezone,
    )
    try:
        results = client.search(args.query)
    except PlaceSearchNoResultsError as e:
        print_error(e.message)
        return ExitCode.NO_RESULTS
    except PlaceSearchError as e:
        print_error(e.message)
        return ExitCode.SEARCH_FAILED

    if args.json:
        print_json([r.to_dict() for r in results])
        return ExitCode.OK

    for store in results:
        print(f"{Colors.BOLD}{store.headline:<4}{Colors.END} {store.name}")
        print_kv("Adress", store.address, indent=1)
        for line in store.opening_hours:
            print(f"    {line}")
        print_kv("Karta", store.maps_url, indent=1)
    return ExitCode.OK


def cmd_serve(args, settings: Settings) -> int:
    """Run the HTTP service."""
    import uvicorn
    from bolagstatus.service.main import create_app

    uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)
    return ExitCode.OK


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bolagstatus",
        description="Är Systembolaget öppet? Opening status, countdown and holidays.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   OK
  10  INPUT_INVALID   Invalid argument value
  11  CONFIG_ERROR    Environment or hours file could not be loaded
  12  SEARCH_FAILED   Store search failed
  13  NO_RESULTS      Store search found nothing

Examples:
  bolagstatus status
  bolagstatus status --at 2025-12-24T11:00 --json
  bolagstatus watch --ticks 5
  bolagstatus holidays --year 2026
  bolagstatus stores Göteborg
  bolagstatus serve --port 8080
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    status_parser = subparsers.add_parser("status", help="Show the current opening status")
    status_parser.add_argument("--at", type=_parse_at,
                               help="Evaluate another instant (ISO 8601; naive = Swedish time)")
    status_parser.add_argument("--json", action="store_true", help="Print JSON")
    status_parser.set_defaults(func=cmd_status)

    watch_parser = subparsers.add_parser("watch", help="Print the status every second")
    watch_parser.add_argument("--ticks", type=int, help="Stop after N ticks")
    watch_parser.add_argument("--interval", type=float, help="Seconds between ticks")
    watch_parser.set_defaults(func=cmd_watch)

    holidays_parser = subparsers.add_parser("holidays", help="List Swedish public holidays")
    holidays_parser.add_argument("--year", type=int, help="Year (default: current year)")
    holidays_parser.add_argument("--next", action="store_true", help="Show only the next closing day")
    holidays_parser.add_argument("--json", action="store_true", help="Print JSON")
    holidays_parser.set_defaults(func=cmd_holidays)

    hours_parser = subparsers.add_parser("hours", help="Show standard opening hours")
    hours_parser.set_defaults(func=cmd_hours)

    stores_parser = subparsers.add_parser("stores", help="Search for a store")
    stores_parser.add_argument("query", help="Town, street or store name")
    stores_parser.add_argument("--json", action="store_true", help="Print JSON")
    stores_parser.set_defaults(func=cmd_stores)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    """Main entry point."""
    if not sys.stdout.isatty():
        Colors.disable()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE

    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level, "text")
    except ConfigurationError as e:
        print_error(str(e))
        return ExitCode.CONFIG_ERROR

    try:
        return args.func(args, settings)
    except (HoursLoadError, HoursValidationError) as e:
        print_error(str(e))
        return ExitCode.CONFIG_ERROR
    except BolagStatusError as e:
        print_error(str(e))
        return ExitCode.INTERNAL_ERROR
    except ValueError as e:
        print_error(str(e))
        return ExitCode.INPUT_INVALID


if __name__ == "__main__":
    sys.exit(main())
