"""Profile subcommand implementation."""

from pathlib import Path

from ..core import RouteMappingError, load_track
from ..exporters import export_profile_csv
from ..route import build_route, elevation_profile


def run_profile(args):
    """
    Export the elevation profile of a track.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code
    """
    if not Path(args.gpx).exists():
        print(f"\n❌ Error: GPX file not found: {args.gpx}")
        return 1

    try:
        route = build_route(load_track(args.gpx))
    except RouteMappingError as e:
        print(f"\n❌ Error reading track: {e}")
        return 1

    profile = elevation_profile(route)
    export_profile_csv(profile, args.output)

    if profile:
        elevations = [p.elevation for p in profile]
        print(f"✓ Route length: {route.total_length:.2f} km")
        print(f"  Elevation: {min(elevations):.0f} - {max(elevations):.0f} m")
    print(f"✓ Saved {len(profile)} profile points to {args.output}")
    return 0
