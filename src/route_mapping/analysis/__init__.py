"""Geometric route analysis: projection, corridors and POI enrichment."""

from .projector import Projection, project, TIE_TOLERANCE_KM
from .corridor import Corridor, build_corridor, local_crs, validate_radius
from .enrichment import enrich, DISTANCE_TOLERANCE_KM
from .analyzer import AnalysisResult, RouteAnalyzer

__all__ = [
    "Projection",
    "project",
    "TIE_TOLERANCE_KM",
    "Corridor",
    "build_corridor",
    "local_crs",
    "validate_radius",
    "enrich",
    "DISTANCE_TOLERANCE_KM",
    "AnalysisResult",
    "RouteAnalyzer",
]
