"""Distance-indexed route model."""

from .models import Sample, ProfilePoint, Route, RouteSegment
from .operations import build_route, point_at_distance, slice_route, elevation_profile

__all__ = [
    "Sample",
    "ProfilePoint",
    "Route",
    "RouteSegment",
    "build_route",
    "point_at_distance",
    "slice_route",
    "elevation_profile",
]
