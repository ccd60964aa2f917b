"""Nearest-point projection of arbitrary points onto a route polyline."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.utils import haversine_km, haversine_km_array
from ..route.models import Route

# Distances closer than this are treated as equal when picking a segment
TIE_TOLERANCE_KM = 1e-9


@dataclass(frozen=True)
class Projection:
    """Closest location on a route to a query point.

    Attributes:
        lat: Latitude of the projected point
        lon: Longitude of the projected point
        distance_to_route: Haversine distance from the query point in km
        route_position: Distance along the polyline to the projected point in km
        segment_index: Index of the winning polyline segment (vertex pair)
    """

    lat: float
    lon: float
    distance_to_route: float
    route_position: float
    segment_index: int


def project(lat: float, lon: float, route: Route) -> Optional[Projection]:
    """
    Find the point on ``route`` closest to ``(lat, lon)``.

    Each vertex pair is treated as a straight segment in a local
    equirectangular frame centred on the query point. The query point is
    projected onto every segment at once (clamped to the segment's extent),
    the haversine distance to each projected location is measured, and the
    smallest wins. Ties resolve to the earliest segment so the reported
    route position follows route order.

    Works for both :class:`Route` and :class:`RouteSegment`; the route
    position is measured from the start of the polyline passed in.

    Returns:
        Projection, or None when the route has no samples
    """
    n = len(route)
    if n == 0:
        return None
    if n == 1:
        only = route.samples[0]
        return Projection(
            lat=only.lat,
            lon=only.lon,
            distance_to_route=haversine_km(lat, lon, only.lat, only.lon),
            route_position=0.0,
            segment_index=0,
        )

    lats, lons, cum = route.lats, route.lons, route.cumulative_array
    scale = np.cos(np.radians(lat))

    # Segment vectors in the local frame (degrees, longitude scaled)
    ax = (lons[:-1] - lon) * scale
    ay = lats[:-1] - lat
    dx = (lons[1:] - lons[:-1]) * scale
    dy = lats[1:] - lats[:-1]

    seg_sq = dx * dx + dy * dy
    dot = -(ax * dx + ay * dy)
    t = np.divide(dot, seg_sq, out=np.zeros_like(dot), where=seg_sq > 0.0)
    np.clip(t, 0.0, 1.0, out=t)

    proj_lat = lats[:-1] + t * (lats[1:] - lats[:-1])
    proj_lon = lons[:-1] + t * (lons[1:] - lons[:-1])
    distances = haversine_km_array(lat, lon, proj_lat, proj_lon)

    best = float(distances.min())
    index = int(np.flatnonzero(distances <= best + TIE_TOLERANCE_KM)[0])

    seg_len = cum[index + 1] - cum[index]
    position = float(cum[index] + t[index] * seg_len)
    position = min(max(position, 0.0), route.total_length)

    return Projection(
        lat=float(proj_lat[index]),
        lon=float(proj_lon[index]),
        distance_to_route=float(distances[index]),
        route_position=position,
        segment_index=index,
    )
