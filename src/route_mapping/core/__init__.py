"""Core utilities for route mapping."""

from .errors import (
    RouteMappingError,
    ParseError,
    InvalidParameterError,
    GeometryError,
    EnrichmentCancelled,
)
from .utils import (
    EARTH_RADIUS_KM,
    haversine_km,
    haversine_km_array,
    get_bounding_box,
)
from .config import Config
from .parser import parse_track, load_track

__all__ = [
    "RouteMappingError",
    "ParseError",
    "InvalidParameterError",
    "GeometryError",
    "EnrichmentCancelled",
    "EARTH_RADIUS_KM",
    "haversine_km",
    "haversine_km_array",
    "get_bounding_box",
    "Config",
    "parse_track",
    "load_track",
]
