"""Data models for parsed tracks and the distance-indexed route."""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True)
class Sample:
    """A single recorded track point."""

    lat: float
    lon: float
    elevation: float = 0.0

    @property
    def latlon(self) -> Tuple[float, float]:
        return (self.lat, self.lon)


@dataclass(frozen=True)
class ProfilePoint:
    """One entry of the elevation profile (distance in km, elevation in m)."""

    distance: float
    elevation: float


@dataclass(frozen=True)
class Route:
    """
    Continuous-distance model of a track.

    ``cumulative_distance[i]`` is the haversine length in kilometers from the
    first sample to ``samples[i]``. Both sequences are tuples of equal length
    and the route is never mutated after construction; derived views are
    built with :func:`route_mapping.route.slice_route`.
    """

    samples: Tuple[Sample, ...]
    cumulative_distance: Tuple[float, ...]
    _arrays: Tuple[np.ndarray, np.ndarray, np.ndarray] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if len(self.samples) != len(self.cumulative_distance):
            raise ValueError(
                "samples and cumulative_distance must have the same length "
                f"({len(self.samples)} != {len(self.cumulative_distance)})"
            )
        lats = np.fromiter((s.lat for s in self.samples), dtype=float, count=len(self.samples))
        lons = np.fromiter((s.lon for s in self.samples), dtype=float, count=len(self.samples))
        cum = np.asarray(self.cumulative_distance, dtype=float)
        for array in (lats, lons, cum):
            array.setflags(write=False)
        object.__setattr__(self, "_arrays", (lats, lons, cum))

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def total_length(self) -> float:
        """Total route length in kilometers (0 for empty routes)."""
        if not self.cumulative_distance:
            return 0.0
        return self.cumulative_distance[-1]

    @property
    def is_degenerate(self) -> bool:
        """True when the route has no extent to measure against."""
        return len(self.samples) < 2 or self.total_length <= 0.0

    @property
    def lats(self) -> np.ndarray:
        return self._arrays[0]

    @property
    def lons(self) -> np.ndarray:
        return self._arrays[1]

    @property
    def cumulative_array(self) -> np.ndarray:
        return self._arrays[2]

    def coordinates(self) -> List[Tuple[float, float]]:
        """Return the polyline as (lon, lat) pairs, GeoJSON axis order."""
        return [(s.lon, s.lat) for s in self.samples]


@dataclass(frozen=True)
class RouteSegment(Route):
    """
    A route restricted to the position window ``[start, end]`` of its parent.

    ``start`` and ``end`` are positions on the parent route; the segment's own
    cumulative distances start at 0, so ``total_length == end - start``.
    """

    start: float = 0.0
    end: float = 0.0

    def __repr__(self) -> str:
        return (
            f"RouteSegment(start={self.start:.3f}, end={self.end:.3f}, "
            f"samples={len(self.samples)})"
        )
