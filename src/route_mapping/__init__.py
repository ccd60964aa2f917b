"""Route Mapping - Find POIs along GPS tracks and measure them against the route."""

__version__ = "0.1.0"

# Expose main classes for programmatic use
from .core import (
    Config,
    parse_track,
    load_track,
    RouteMappingError,
    ParseError,
    InvalidParameterError,
    GeometryError,
    EnrichmentCancelled,
)
from .route import (
    Sample,
    Route,
    RouteSegment,
    build_route,
    point_at_distance,
    slice_route,
    elevation_profile,
)
from .pois import POI, PoiType, ClosestPoint, load_pois, sort_pois
from .analysis import (
    Projection,
    project,
    Corridor,
    build_corridor,
    enrich,
    AnalysisResult,
    RouteAnalyzer,
)

__all__ = [
    "__version__",
    "Config",
    "parse_track",
    "load_track",
    "RouteMappingError",
    "ParseError",
    "InvalidParameterError",
    "GeometryError",
    "EnrichmentCancelled",
    "Sample",
    "Route",
    "RouteSegment",
    "build_route",
    "point_at_distance",
    "slice_route",
    "elevation_profile",
    "POI",
    "PoiType",
    "ClosestPoint",
    "load_pois",
    "sort_pois",
    "Projection",
    "project",
    "Corridor",
    "build_corridor",
    "enrich",
    "AnalysisResult",
    "RouteAnalyzer",
]
