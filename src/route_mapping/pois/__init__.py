"""Points of interest: models, loading and display ordering."""

from .models import POI, PoiType, ClosestPoint
from .loader import load_pois, pois_from_frame
from .sorting import sort_pois, SORT_COLUMNS

__all__ = [
    "POI",
    "PoiType",
    "ClosestPoint",
    "load_pois",
    "pois_from_frame",
    "sort_pois",
    "SORT_COLUMNS",
]
