"""Error types raised by the route analysis engine."""

from typing import Optional


class RouteMappingError(RuntimeError):
    """Base error for route mapping failures."""


class ParseError(RouteMappingError):
    """Raised when track or POI input is not well-formed."""


class InvalidParameterError(RouteMappingError, ValueError):
    """Raised when a caller passes a parameter outside its valid domain.

    Attributes:
        parameter: Name of the offending parameter (e.g. ``radius_km``)
    """

    def __init__(self, parameter: str, message: str):
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


class GeometryError(RouteMappingError):
    """Raised when the geometry backend fails to build or reproject a shape.

    Attributes:
        stage: Pipeline stage that failed (e.g. ``buffer``, ``reproject``)
    """

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message if stage is None else f"[{stage}] {message}")
        self.stage = stage


class EnrichmentCancelled(RouteMappingError):
    """Raised when a caller cancels POI enrichment between POIs."""


__all__ = [
    "RouteMappingError",
    "ParseError",
    "InvalidParameterError",
    "GeometryError",
    "EnrichmentCancelled",
]
