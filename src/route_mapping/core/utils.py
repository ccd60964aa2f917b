"""Shared utility functions for route analysis."""

from math import radians, sin, cos, sqrt, atan2
from typing import Dict, Iterable, Tuple

import numpy as np

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1, lon1, lat2, lon2):
    """
    Calculate distance between two points in kilometers using Haversine formula.

    Args:
        lat1, lon1: Coordinates of first point
        lat2, lon2: Coordinates of second point

    Returns:
        Distance in kilometers
    """
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat/2)**2 + cos(lat1) * cos(lat2) * sin(dlon/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1-a))

    return EARTH_RADIUS_KM * c


def haversine_km_array(lat1, lon1, lat2, lon2) -> np.ndarray:
    """Vectorised :func:`haversine_km` over numpy arrays (broadcasting)."""
    lat1, lon1, lat2, lon2 = (
        np.radians(np.asarray(v, dtype=float)) for v in (lat1, lon1, lat2, lon2)
    )
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # Rounding can push ``a`` a hair outside [0, 1] for antipodal points.
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def get_bounding_box(points: Iterable[Tuple[float, float]]) -> Dict[str, float]:
    """
    Calculate bounding box around (lat, lon) points.

    Args:
        points: Iterable of (lat, lon) tuples

    Returns:
        Dict with keys: south, north, west, east

    Raises:
        ValueError: If no points are given
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute bounding box of an empty point set")

    lats = [p[0] for p in points]
    lons = [p[1] for p in points]

    return {
        'south': min(lats),
        'north': max(lats),
        'west': min(lons),
        'east': max(lons),
    }


def parse_float(value, default: float = 0.0) -> float:
    """Parse a float leniently, returning ``default`` for missing or bad input."""
    if value is None:
        return default
    try:
        result = float(str(value).strip())
    except ValueError:
        return default
    if np.isnan(result) or np.isinf(result):
        return default
    return result
