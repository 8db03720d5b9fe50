"""CLI for resolving station names into catalog identifiers."""

import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from station_id_resolver.adapters.config import AppConfig
from station_id_resolver.domain.errors import StationResolutionError
from station_id_resolver.domain.models import ResolvedStation, StationRecord, StationSearchReport
from station_id_resolver.main import ResolverComponents, build_components, configure_logging


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _report_to_dict(report: StationSearchReport) -> dict[str, Any]:
    """JSON-ready form of a search report."""
    data = asdict(report)
    data["failures"] = [failure.model_dump() for failure in report.failures]
    return data


def _format_record(record: StationRecord) -> str:
    """One-line summary of a station record."""
    location = f"{record.latitude:.5f}, {record.longitude:.5f}"
    distance = f", {record.distance_meters}" if record.distance_meters else ""
    return f"{record.name} [{record.line_name}] ({record.region}; {location}{distance})"


def _display_search_report(report: StationSearchReport) -> None:
    """Display a search report in human-readable form."""
    print(f"\nQuery: {report.query}")
    print(f"Tried: {' -> '.join(report.attempted_terms) or '(nothing)'}")
    for failure in report.failures:
        status = f" [{failure.status_code}]" if failure.status_code else ""
        print(f"  ! remote failure{status}: {failure.reason}")

    if not report.found:
        print("\nNo stations found.")
        return

    print(f"Matched: {report.matched_term}\n")
    print(f"Stations ({len(report.records)}):")
    print("=" * 70)
    for record in report.records:
        print(f"  {_format_record(record)}")


def _display_resolved(resolved: list[ResolvedStation]) -> None:
    """Display resolved stations in human-readable form."""
    print(f"\nResolved stations ({len(resolved)}):")
    print("=" * 70)
    for item in resolved:
        print(f"  {item.record.name} [{item.record.line_name}]")
        if item.station_id:
            print(f"    → {item.station_id} ({item.source.value})")
        else:
            print(f"    → unresolved: {item.error or 'no identifier'}")


async def _handle_search_command(
    components: ResolverComponents, query: str, as_json: bool
) -> None:
    """Handle the search command."""
    report = await components.search_client.search_report(query)
    if as_json:
        _print_json(_report_to_dict(report))
    else:
        _display_search_report(report)

    if not report.found:
        sys.exit(1)


async def _handle_nearby_command(
    components: ResolverComponents,
    longitude: float,
    latitude: float,
    radius: float,
    as_json: bool,
) -> None:
    """Handle the nearby command."""
    records = await components.search_client.nearby_stations(longitude, latitude, radius)
    if as_json:
        _print_json([asdict(record) for record in records])
    elif records:
        print(f"\nStations within {radius:.0f}m ({len(records)}):")
        print("=" * 70)
        for record in records:
            print(f"  {_format_record(record)}")
    else:
        print("No stations found nearby.")

    if not records:
        sys.exit(1)


def _handle_railway_command(components: ResolverComponents, line_name: str) -> None:
    """Handle the railway command."""
    railway_id = components.railway_catalog.lookup(line_name)
    if railway_id is None:
        print(f"Unknown railway: {line_name}", file=sys.stderr)
        sys.exit(1)
    print(railway_id)


def _handle_synthesize_command(
    components: ResolverComponents, station_name: str, line_name: str
) -> None:
    """Handle the synthesize command."""
    station_id = components.synthesizer.synthesize(station_name, line_name)
    if station_id is None:
        print(f"Could not synthesize an identifier for '{station_name}'", file=sys.stderr)
        sys.exit(1)
    print(station_id)


async def _handle_resolve_command(
    components: ResolverComponents, station_name: str, line_name: str, as_json: bool
) -> None:
    """Handle the resolve command."""
    station_id = await components.resolver.resolve(station_name, line_name)
    if as_json:
        _print_json({"station": station_name, "line": line_name, "station_id": station_id})
    elif station_id:
        print(station_id)

    if station_id is None:
        print(f"Could not resolve '{station_name}' on '{line_name}'", file=sys.stderr)
        sys.exit(1)


async def _handle_resolve_query_command(
    components: ResolverComponents, query: str, as_json: bool
) -> None:
    """Handle the resolve-query command."""
    resolved = await components.resolver.resolve_query(query)
    if as_json:
        _print_json([asdict(item) for item in resolved])
    elif resolved:
        _display_resolved(resolved)
    else:
        print(f"No stations found for '{query}'.")

    if not any(item.station_id for item in resolved):
        sys.exit(1)


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Resolve Japanese station names into ODPT station identifiers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations (with alias and spelling fallbacks)
  station-id-resolver search "読売ランド"

  # Stations around a coordinate
  station-id-resolver nearby 139.7671 35.6812 --radius 1000

  # Railway identifier of a line
  station-id-resolver railway "JR山手線"

  # Offline identifier
  station-id-resolver synthesize "東京" "JR山手線"

  # Catalog identifier (needs ODPT_CONSUMER_KEY, falls back to synthesis)
  station-id-resolver resolve "東京" "JR山手線"

  # Search and resolve every matching station/line
  station-id-resolver resolve-query "新宿"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="Find stations near a coordinate")
    nearby_parser.add_argument("longitude", type=float, help="Longitude (e.g., 139.7671)")
    nearby_parser.add_argument("latitude", type=float, help="Latitude (e.g., 35.6812)")
    nearby_parser.add_argument(
        "--radius", type=float, default=2_000, help="Radius in meters (default: 2000)"
    )
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    railway_parser = subparsers.add_parser("railway", help="Show the railway identifier of a line")
    railway_parser.add_argument("line_name", help="Line name (e.g., JR山手線)")

    synthesize_parser = subparsers.add_parser(
        "synthesize", help="Build a station identifier offline"
    )
    synthesize_parser.add_argument("station_name", help="Station name (e.g., 東京)")
    synthesize_parser.add_argument("line_name", help="Line name (e.g., JR山手線)")

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve a station identifier via the catalog"
    )
    resolve_parser.add_argument("station_name", help="Station name (e.g., 東京)")
    resolve_parser.add_argument("line_name", help="Line name (e.g., JR山手線)")
    resolve_parser.add_argument("--json", action="store_true", help="Output as JSON")

    resolve_query_parser = subparsers.add_parser(
        "resolve-query", help="Search and resolve every matching station"
    )
    resolve_query_parser.add_argument("query", help="Station name to search for")
    resolve_query_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def _execute_command(args: Any, components: ResolverComponents) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "search":
        await _handle_search_command(components, args.query, args.json)
    elif args.command == "nearby":
        await _handle_nearby_command(
            components, args.longitude, args.latitude, args.radius, args.json
        )
    elif args.command == "railway":
        _handle_railway_command(components, args.line_name)
    elif args.command == "synthesize":
        _handle_synthesize_command(components, args.station_name, args.line_name)
    elif args.command == "resolve":
        await _handle_resolve_command(components, args.station_name, args.line_name, args.json)
    elif args.command == "resolve-query":
        await _handle_resolve_query_command(components, args.query, args.json)


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging(config.log_level)

    try:
        async with aiohttp.ClientSession() as session:
            components = build_components(config, session)
            await _execute_command(args, components)
    except StationResolutionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
