"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import json
import sys

from pydantic import ValidationError

from earthwatch import __version__
from earthwatch.analysis.orbits import marker_position, orbit_position
from earthwatch.config import get_settings
from earthwatch.dates import format_display_date
from earthwatch.errors import EarthwatchError
from earthwatch.flows.build import build_all
from earthwatch.flows.fetch import select_location
from earthwatch.logging_config import configure_logging
from earthwatch.reference import ISS, LOCATIONS, SATELLITES, find_location
from earthwatch.schemas import Coordinate, Location


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="earthwatch",
        description="Weather and solar dashboard for preset city coordinates",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("locations", help="List preset locations")

    satellites_parser = subparsers.add_parser("satellites", help="List satellites and positions")
    satellites_parser.add_argument(
        "--elapsed",
        type=float,
        default=0.0,
        help="Playback time in seconds (default: 0)",
    )

    snapshot_parser = subparsers.add_parser("snapshot", help="Fetch and show one location")
    snapshot_parser.add_argument("--location", type=str, default=None, help="Preset name")
    snapshot_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    snapshot_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    snapshot_parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")

    build_parser = subparsers.add_parser("build", help="Fetch data and build the dashboard page")
    build_parser.add_argument(
        "--location",
        type=str,
        default=None,
        help="Build only this preset (default: all)",
    )

    serve_parser = subparsers.add_parser("serve", help="Serve the built page locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default location: {settings.default_location}")
    return 0


def cmd_locations(_args: argparse.Namespace) -> int:
    """Handle the 'locations' command."""
    for location in LOCATIONS:
        marker = marker_position(location.lat, location.lon)
        print(
            f"{location.name:<20} {location.district:<12} "
            f"{location.lat:>9.4f} {location.lon:>10.4f}  "
            f"marker=({marker.x:.2f}, {marker.y:.2f}, {marker.z:.2f})"
        )
    return 0


def cmd_satellites(args: argparse.Namespace) -> int:
    """Handle the 'satellites' command."""
    for sat in [*SATELLITES, ISS]:
        pos = orbit_position(sat, args.elapsed)
        print(
            f"{sat.name:<34} {sat.altitude_km:>6.0f} km {sat.period_min:>6.1f} min "
            f"{sat.inclination_deg:>5.1f} deg  ({pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f})"
        )
    return 0


def _resolve_location(args: argparse.Namespace) -> Location | None:
    if args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None:
            print("Error: --lat and --lon must be given together", file=sys.stderr)
            return None
        try:
            coordinate = Coordinate(latitude=args.lat, longitude=args.lon)
        except ValidationError as exc:
            print(f"Error: invalid coordinate: {exc.errors()[0]['msg']}", file=sys.stderr)
            return None
        return Location(name="Custom", district="-", coordinate=coordinate)

    name = args.location or get_settings().default_location
    location = find_location(name)
    if location is None:
        print(f"Error: unknown location '{name}'", file=sys.stderr)
    return location


def cmd_snapshot(args: argparse.Namespace) -> int:
    """Handle the 'snapshot' command."""
    location = _resolve_location(args)
    if location is None:
        return 1

    try:
        snapshot = select_location(location)
    except EarthwatchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if snapshot is None:
        print("Error: selection superseded", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(snapshot.model_dump(by_alias=True), indent=2))
        return 0

    current = snapshot.current
    print(f"{location.name} ({location.lat:.4f}, {location.lon:.4f})")
    print(f"Last update: {format_display_date(snapshot.latest_date)}")
    print(f"Temperature: {current.temperature:.1f} C")
    print(f"Humidity:    {current.humidity:.1f} %")
    print(f"Wind speed:  {current.wind_speed:.1f} m/s")
    print(f"Solar:       {current.solar_percent:.1f}")
    for metric in snapshot.series:
        print(
            f"  {metric.date}  T={metric.temperature}  RH={metric.humidity}  "
            f"WS={metric.wind_speed}  SOL={metric.solar_percent}"
        )
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    result = build_all(location_name=args.location)
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Done: {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built page locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'earthwatch build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging("DEBUG" if args.debug else None)

    commands = {
        "info": cmd_info,
        "locations": cmd_locations,
        "satellites": cmd_satellites,
        "snapshot": cmd_snapshot,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
