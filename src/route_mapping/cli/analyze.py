"""Analyze subcommand implementation."""

from pathlib import Path

from ..analysis import RouteAnalyzer
from ..core import Config, RouteMappingError, load_track
from ..exporters import GpxExporter, export_csv, export_geojson
from ..pois import load_pois, sort_pois
from ..route import build_route


def _print_table(pois):
    """Print enriched POIs as a fixed-width table."""
    print(f"\n  {'Name':25s} {'Type':6s} {'Distance (km)':>14s} {'Position (km)':>14s}")
    for poi in pois:
        print(f"  {poi.name[:25]:25s} {poi.type.value:6s} "
              f"{poi.min_distance:14.3f} {poi.route_position:14.3f}")


def run_analyze(args):
    """
    Run the corridor analysis.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code
    """
    print("=" * 60)
    print("Route Mapping")
    print("=" * 60)
    print(f"\nGPX file: {args.gpx}")
    print(f"POI file: {args.pois}")
    print(f"Output: {args.output}")

    for label, path in (("GPX", args.gpx), ("POI", args.pois)):
        if not Path(path).exists():
            print(f"\n❌ Error: {label} file not found: {path}")
            return 1

    # Load configuration
    if args.config:
        print(f"Config: {args.config}")
        try:
            config = Config(args.config)
        except FileNotFoundError as e:
            print(f"\n❌ Error: {e}")
            return 1
    else:
        config = Config()  # Use defaults

    print("\n" + "-" * 60)

    try:
        route = build_route(load_track(args.gpx))
        print(f"✓ Loaded route with {len(route)} points, {route.total_length:.2f} km")

        pois = load_pois(args.pois)
        print(f"✓ Loaded {len(pois)} POIs")

        analyzer = RouteAnalyzer(route, config=config)
        default_start, default_end = analyzer.default_range()
        start = default_start if args.start is None else args.start
        end = default_end if args.end is None else args.end
        radius = config.radius_km if args.radius is None else args.radius
        print(f"Window: km {start:.1f} - {end:.1f}, corridor radius {radius:g} km")

        result = analyzer.analyze(pois, radius_km=radius, position_range=(start, end))

        if not result.pois:
            print(f"\n⚠ No POIs found within {radius:g} km.")
        else:
            print(f"✓ {len(result.pois)} POIs along route")
            order = "desc" if args.desc else "asc"
            _print_table(sort_pois(result.pois, column=args.sort, order=order))

        export_csv(result.pois, args.output)
        print(f"\n✓ Saved {len(result.pois)} POIs to {args.output}")

        if args.geojson:
            export_geojson(result, args.geojson, config=config)
            print(f"✓ Exported GeoJSON file: {args.geojson}")

        if args.gpx_out:
            GpxExporter(config=config).export_gpx(result, args.gpx_out)
            print(f"✓ Exported GPX file: {args.gpx_out}")

    except KeyboardInterrupt:
        print("\n\n⚠ Analysis interrupted by user")
        return 130
    except RouteMappingError as e:
        print(f"\n❌ Error during analysis: {e}")
        return 1

    print("\n" + "=" * 60)
    print("✅ ANALYSIS COMPLETE!")
    print("=" * 60)
    return 0
