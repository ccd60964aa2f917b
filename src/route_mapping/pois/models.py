"""Data models for points of interest."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class PoiType(str, Enum):
    """Kind of accommodation a POI offers."""

    HOUSE = "house"
    TENT = "tent"
    HOTEL = "hotel"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> "PoiType":
        """Map a free-form value onto a POI type, unknown values become OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class ClosestPoint:
    """Location on the route nearest to a POI."""

    lat: float
    lon: float


@dataclass(frozen=True)
class POI:
    """
    A named point of interest.

    The ``min_distance``, ``route_position`` and ``closest_point`` fields are
    None until the POI passes through
    :func:`route_mapping.analysis.enrich`, which returns a new record.
    """

    id: Union[int, str]
    name: str
    lat: float
    lon: float
    description: str = ""
    type: PoiType = PoiType.OTHER
    min_distance: Optional[float] = None  # km to the route
    route_position: Optional[float] = None  # km along the route
    closest_point: Optional[ClosestPoint] = None

    def __post_init__(self):
        if not isinstance(self.type, PoiType):
            object.__setattr__(self, "type", PoiType.parse(self.type))

    def __repr__(self) -> str:
        return f"POI(id={self.id!r}, name='{self.name}', lat={self.lat}, lon={self.lon})"
