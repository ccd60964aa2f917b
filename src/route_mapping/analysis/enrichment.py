"""POI enrichment: corridor containment followed by projection."""

import logging
import threading
from dataclasses import replace
from typing import List, Optional, Sequence

from ..core.config import Config
from ..core.errors import EnrichmentCancelled
from ..pois.models import POI, ClosestPoint
from ..route.models import Route
from .corridor import Corridor, build_corridor, validate_radius
from .projector import project

logger = logging.getLogger(__name__)

# Numeric slack allowed between the corridor radius and reported distances
DISTANCE_TOLERANCE_KM = 1e-6


def enrich(pois: Sequence[POI], segment: Route, radius_km: float,
           config: Optional[Config] = None,
           corridor: Optional[Corridor] = None,
           cancel_event: Optional[threading.Event] = None) -> List[POI]:
    """
    Find the POIs inside the corridor around ``segment`` and measure them.

    Steps:
        1. Build the corridor (unless one built for the same segment and
           radius is passed in).
        2. Keep POIs covered by the corridor, boundary inclusive.
        3. Project each survivor onto the segment and attach
           ``min_distance``, ``route_position`` and ``closest_point``.

    A POI is only reported when its distance to the segment is at most
    ``radius_km`` (plus a tiny numeric tolerance). Input order is preserved
    and the input records are never modified.

    Args:
        pois: POI source set
        segment: Route or RouteSegment to measure against
        radius_km: Corridor half-width in kilometers
        config: Configuration (uses defaults if None)
        corridor: Prebuilt corridor for ``segment`` at ``radius_km``
        cancel_event: When set between POIs, enrichment stops

    Returns:
        New enriched POI records; empty when nothing qualifies or the
        segment is degenerate

    Raises:
        InvalidParameterError: If radius_km is not a positive finite number
        GeometryError: If the corridor cannot be built
        EnrichmentCancelled: If ``cancel_event`` is set mid-run
    """
    radius_km = validate_radius(radius_km)

    if not pois or segment.is_degenerate:
        return []

    if corridor is None:
        corridor = build_corridor(segment, radius_km, config)

    inside = corridor.covers_mask([p.lat for p in pois], [p.lon for p in pois])
    candidates = [poi for poi, hit in zip(pois, inside) if hit]
    logger.debug("%d of %d POIs inside %.2f km corridor", len(candidates), len(pois), radius_km)

    enriched = []
    for poi in candidates:
        if cancel_event is not None and cancel_event.is_set():
            raise EnrichmentCancelled(
                f"Enrichment cancelled after {len(enriched)} of {len(candidates)} POIs"
            )

        projection = project(poi.lat, poi.lon, segment)
        if projection.distance_to_route > radius_km + DISTANCE_TOLERANCE_KM:
            continue

        enriched.append(replace(
            poi,
            min_distance=projection.distance_to_route,
            route_position=projection.route_position,
            closest_point=ClosestPoint(lat=projection.lat, lon=projection.lon),
        ))

    return enriched
