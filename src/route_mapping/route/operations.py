"""Route construction, interpolation and slicing."""

import logging
from bisect import bisect_right
from typing import List, Optional, Sequence

from ..core.errors import InvalidParameterError
from ..core.utils import haversine_km
from .models import ProfilePoint, Route, RouteSegment, Sample

logger = logging.getLogger(__name__)


def build_route(samples: Sequence[Sample]) -> Route:
    """
    Build a distance-indexed route from parsed samples.

    Args:
        samples: Ordered track samples (may be empty)

    Returns:
        Route with a cumulative haversine distance table in kilometers
    """
    samples = tuple(samples)
    cumulative: List[float] = []
    total = 0.0
    for i, sample in enumerate(samples):
        if i > 0:
            prev = samples[i - 1]
            total += haversine_km(prev.lat, prev.lon, sample.lat, sample.lon)
        cumulative.append(total)

    logger.debug("Built route with %d samples, %.3f km", len(samples), total)
    return Route(samples=samples, cumulative_distance=tuple(cumulative))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def point_at_distance(route: Route, distance: float) -> Optional[Sample]:
    """
    Locate the point at a cumulative distance along the route.

    ``distance`` is clamped to ``[0, total_length]``. Within the bracketing
    segment latitude, longitude and elevation are interpolated linearly.

    Returns:
        Interpolated sample, or None when the route has no samples
    """
    samples = route.samples
    if not samples:
        return None
    if len(samples) == 1:
        return samples[0]

    cumulative = route.cumulative_distance
    d = _clamp(float(distance), 0.0, route.total_length)

    # Index of the segment start: last vertex with cumulative <= d
    i = bisect_right(cumulative, d) - 1
    if i >= len(samples) - 1:
        return samples[-1]

    a, b = samples[i], samples[i + 1]
    seg_len = cumulative[i + 1] - cumulative[i]
    if seg_len <= 0.0:
        return a
    t = (d - cumulative[i]) / seg_len
    if t <= 0.0:
        return a
    return Sample(
        lat=a.lat + t * (b.lat - a.lat),
        lon=a.lon + t * (b.lon - a.lon),
        elevation=a.elevation + t * (b.elevation - a.elevation),
    )


def slice_route(route: Route, start: float, end: float) -> RouteSegment:
    """
    Restrict a route to the cumulative-distance window ``[start, end]``.

    The endpoints are synthesized with :func:`point_at_distance`; every
    original sample strictly between them is kept in order. Bounds outside
    the route are clamped.

    Args:
        route: Parent route
        start: Window start in kilometers
        end: Window end in kilometers

    Returns:
        RouteSegment whose cumulative distances start at 0

    Raises:
        InvalidParameterError: If start > end
    """
    if start > end:
        raise InvalidParameterError(
            "position_range", f"start ({start}) must not exceed end ({end})"
        )

    total = route.total_length
    start = _clamp(float(start), 0.0, total)
    end = _clamp(float(end), 0.0, total)

    if not route.samples:
        return RouteSegment(samples=(), cumulative_distance=(), start=0.0, end=0.0)
    if len(route.samples) == 1:
        return RouteSegment(
            samples=route.samples, cumulative_distance=(0.0,), start=0.0, end=0.0
        )

    first = point_at_distance(route, start)
    last = point_at_distance(route, end)

    samples = [first]
    cumulative = [0.0]
    for sample, position in zip(route.samples, route.cumulative_distance):
        if start < position < end:
            samples.append(sample)
            cumulative.append(position - start)
    samples.append(last)
    cumulative.append(end - start)

    return RouteSegment(
        samples=tuple(samples),
        cumulative_distance=tuple(cumulative),
        start=start,
        end=end,
    )


def elevation_profile(route: Route) -> List[ProfilePoint]:
    """Get (cumulative distance, elevation) pairs for charting."""
    return [
        ProfilePoint(distance=position, elevation=sample.elevation)
        for sample, position in zip(route.samples, route.cumulative_distance)
    ]
