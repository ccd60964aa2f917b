"""Display ordering for enriched POIs."""

from typing import List, Sequence

from ..core.errors import InvalidParameterError
from .models import POI

SORT_COLUMNS = ("name", "min_distance", "route_position")
SORT_ORDERS = ("asc", "desc")


def _numeric_key(value):
    return float("inf") if value is None else value


def sort_pois(pois: Sequence[POI], column: str = "min_distance",
              order: str = "asc") -> List[POI]:
    """
    Sort POIs for display.

    Names compare case-insensitively; missing distances and positions sort
    as +infinity. The sort is stable.

    Args:
        pois: POIs to sort (not modified)
        column: One of ``name``, ``min_distance``, ``route_position``
        order: ``asc`` or ``desc``

    Returns:
        New sorted list

    Raises:
        InvalidParameterError: If column or order is unknown
    """
    if column not in SORT_COLUMNS:
        raise InvalidParameterError(
            "column", f"unknown sort column '{column}', valid: {', '.join(SORT_COLUMNS)}"
        )
    if order not in SORT_ORDERS:
        raise InvalidParameterError("order", f"must be 'asc' or 'desc', got '{order}'")

    if column == "name":
        key = lambda poi: poi.name.casefold()
    else:
        key = lambda poi: _numeric_key(getattr(poi, column))

    return sorted(pois, key=key, reverse=(order == "desc"))
