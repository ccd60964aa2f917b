"""Command-line interface for route mapping."""

import sys
import logging
import argparse


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="route-mapping",
        description="Find POIs along a GPX route and measure their distance to it"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze subcommand
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Find POIs within a corridor around a route window"
    )
    analyze_parser.add_argument(
        "--gpx",
        required=True,
        help="Input GPX track file"
    )
    analyze_parser.add_argument(
        "--pois",
        required=True,
        help="POI source file (.csv or .json with id, name, lat, lon)"
    )
    analyze_parser.add_argument(
        "--radius",
        type=float,
        help="Corridor radius in km (default: from config, 5.0)"
    )
    analyze_parser.add_argument(
        "--start",
        type=float,
        help="Window start in km along the route (default: from config, 0)"
    )
    analyze_parser.add_argument(
        "--end",
        type=float,
        help="Window end in km along the route (default: from config, 20)"
    )
    analyze_parser.add_argument(
        "--sort",
        choices=["name", "min_distance", "route_position"],
        default="min_distance",
        help="Column to sort the printed table by (default: min_distance)"
    )
    analyze_parser.add_argument(
        "--desc",
        action="store_true",
        help="Sort descending"
    )
    analyze_parser.add_argument(
        "--output",
        default="data/pois_along_route.csv",
        help="Output CSV file (default: data/pois_along_route.csv)"
    )
    analyze_parser.add_argument(
        "--geojson",
        help="Also write segment, corridor and POIs as GeoJSON"
    )
    analyze_parser.add_argument(
        "--gpx-out",
        help="Also write segment and POI waypoints as GPX"
    )
    analyze_parser.add_argument(
        "--config",
        help="Path to config.ini file (default: built-in settings)"
    )

    # Profile subcommand
    profile_parser = subparsers.add_parser(
        "profile",
        help="Export the elevation profile of a route"
    )
    profile_parser.add_argument(
        "--gpx",
        required=True,
        help="Input GPX track file"
    )
    profile_parser.add_argument(
        "--output",
        default="data/elevation_profile.csv",
        help="Output CSV file (default: data/elevation_profile.csv)"
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose and not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Route to appropriate subcommand
    if args.command == "analyze":
        from .analyze import run_analyze
        sys.exit(run_analyze(args))
    elif args.command == "profile":
        from .profile import run_profile
        sys.exit(run_profile(args))


if __name__ == "__main__":
    main()
