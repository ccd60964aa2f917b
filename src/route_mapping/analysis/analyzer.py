"""Recompute-on-change entry point for the presentation layer."""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..core.config import Config
from ..core.parser import parse_track
from ..pois.models import POI
from ..route.models import ProfilePoint, Route, RouteSegment
from ..route.operations import build_route, elevation_profile, slice_route
from .corridor import Corridor, build_corridor, validate_radius
from .enrichment import enrich

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the presentation layer renders for one set of inputs."""

    segment: RouteSegment
    corridor: Corridor
    pois: Tuple[POI, ...]
    profile: Tuple[ProfilePoint, ...]
    radius_km: float

    @property
    def position_range(self) -> Tuple[float, float]:
        return (self.segment.start, self.segment.end)


class RouteAnalyzer:
    """Analyze POIs around a selected window of a loaded route.

    Holds the route for the session and the result of the last analysis.
    Calling :meth:`analyze` again with identical inputs returns the cached
    result; any changed input replaces it.
    """

    def __init__(self, route: Route, config: Optional[Config] = None):
        """
        Initialize RouteAnalyzer.

        Args:
            route: Route built from the uploaded track
            config: Configuration object (uses defaults if None)
        """
        self.route = route
        self.config = config or Config()
        self.profile = tuple(elevation_profile(route))
        self._last_key = None
        self._last_result: Optional[AnalysisResult] = None

    @classmethod
    def from_gpx(cls, content: Union[str, bytes],
                 config: Optional[Config] = None) -> 'RouteAnalyzer':
        """Parse GPX markup and build an analyzer for its track."""
        return cls(build_route(parse_track(content)), config=config)

    def default_range(self) -> Tuple[float, float]:
        """Configured position range, clamped to the route."""
        start, end = self.config.get_position_range()
        total = self.route.total_length
        start = min(max(start, 0.0), total)
        end = min(max(end, start), total)
        return start, end

    def analyze(self, pois: Sequence[POI],
                radius_km: Optional[float] = None,
                position_range: Optional[Tuple[float, float]] = None,
                cancel_event: Optional[threading.Event] = None) -> AnalysisResult:
        """
        Slice the route, build the corridor and enrich POIs.

        Args:
            pois: POI source set
            radius_km: Corridor half-width (config default if None)
            position_range: (start, end) in km along the route
                (config default if None)
            cancel_event: Forwarded to :func:`enrich`

        Returns:
            AnalysisResult for these inputs

        Raises:
            InvalidParameterError: If radius_km <= 0 or start > end
            GeometryError: If the corridor cannot be built
        """
        radius = validate_radius(self.config.radius_km if radius_km is None else radius_km)
        start, end = self.default_range() if position_range is None else position_range

        key = (tuple(pois), radius, float(start), float(end))
        if self._last_result is not None and key == self._last_key:
            logger.debug("Inputs unchanged, reusing previous analysis")
            return self._last_result

        segment = slice_route(self.route, start, end)
        corridor = build_corridor(segment, radius, self.config)
        enriched = enrich(
            pois, segment, radius,
            config=self.config,
            corridor=corridor,
            cancel_event=cancel_event,
        )

        result = AnalysisResult(
            segment=segment,
            corridor=corridor,
            pois=tuple(enriched),
            profile=self.profile,
            radius_km=radius,
        )
        self._last_key = key
        self._last_result = result
        return result

    def nearby_pois(self, pois: Sequence[POI], **kwargs) -> List[POI]:
        """Shortcut returning only the enriched POIs of :meth:`analyze`."""
        return list(self.analyze(pois, **kwargs).pois)
