"""Buffered corridor polygons around route segments."""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import geopandas as gpd
import numpy as np
from pyproj import CRS
from pyproj.exceptions import CRSError, ProjError
from shapely.errors import GEOSException
from shapely.geometry import LineString, Point, Polygon, mapping
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from ..core.config import Config
from ..core.errors import GeometryError, InvalidParameterError
from ..core.utils import EARTH_RADIUS_KM, get_bounding_box, haversine_km_array
from ..route.models import Route

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"

# Relative growth applied on top of the chord and distortion corrections
# to absorb floating point error in the round trip through the local frame
CORRIDOR_SLACK = 1e-4


def distortion_factor(segment: Route, lat0: float, lon0: float, radius_km: float) -> float:
    """
    Worst-case tangential stretch of the azimuthal equidistant frame.

    At angular distance ``c`` from the frame centre, lengths perpendicular
    to the radial direction are drawn ``c / sin(c)`` times too long, so a
    buffer drawn in the frame is that much narrower on the ground.

    Returns:
        Factor >= 1 to multiply the buffer distance by

    Raises:
        GeometryError: If the segment reaches too far from the centre
            for a single local frame
    """
    reach = haversine_km_array(lat0, lon0, segment.lats, segment.lons)
    c_max = (float(reach.max()) + radius_km) / EARTH_RADIUS_KM
    if c_max < 1e-9:
        return 1.0
    if c_max >= math.pi / 2.0:
        raise GeometryError(
            f"Segment reaches {c_max * EARTH_RADIUS_KM:.0f} km from its centre",
            stage="buffer",
        )
    return c_max / math.sin(c_max)


def validate_radius(radius_km) -> float:
    """Return ``radius_km`` as a float or raise InvalidParameterError."""
    try:
        radius = float(radius_km)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError("radius_km", f"must be a number, got {radius_km!r}") from e
    if not math.isfinite(radius) or radius <= 0.0:
        raise InvalidParameterError("radius_km", f"must be > 0, got {radius_km!r}")
    return radius


def local_crs(lat0: float, lon0: float) -> CRS:
    """
    Build a spherical azimuthal equidistant CRS centred on ``(lat0, lon0)``.

    The sphere uses the same radius as the haversine distances so buffer
    widths and reported distances agree.
    """
    return CRS.from_proj4(
        f"+proj=aeqd +lat_0={lat0} +lon_0={lon0} "
        f"+R={EARTH_RADIUS_KM * 1000.0} +units=m +no_defs"
    )


@dataclass(frozen=True)
class Corridor:
    """
    Polygonal neighbourhood of a route segment.

    Attributes:
        geometry: Corridor polygon in (lon, lat) coordinates, for rendering
        local_geometry: The same polygon in the metric frame used for containment
        radius_km: Buffer radius the corridor was built with
        crs: Metric frame of ``local_geometry`` (None for an empty corridor)
    """

    geometry: BaseGeometry
    local_geometry: BaseGeometry
    radius_km: float
    crs: Optional[CRS] = None

    @property
    def is_empty(self) -> bool:
        return self.local_geometry.is_empty

    def covers_mask(self, lats: Sequence[float], lons: Sequence[float]) -> np.ndarray:
        """
        Test many points for containment, boundary inclusive.

        Returns:
            Boolean array aligned with the input coordinates
        """
        lats = np.asarray(lats, dtype=float)
        lons = np.asarray(lons, dtype=float)
        if self.is_empty or lats.size == 0:
            return np.zeros(lats.shape, dtype=bool)

        try:
            points = gpd.GeoSeries(gpd.points_from_xy(lons, lats), crs=WGS84).to_crs(self.crs)
            return points.covered_by(self.local_geometry).to_numpy(dtype=bool)
        except (GEOSException, ProjError, CRSError) as e:
            raise GeometryError(f"Containment test failed: {e}", stage="containment") from e

    def contains(self, lat: float, lon: float) -> bool:
        """Check whether a single point lies inside or on the corridor."""
        return bool(self.covers_mask([lat], [lon])[0])

    def to_geojson(self) -> Dict[str, Any]:
        """Get the corridor as a GeoJSON geometry mapping."""
        return mapping(self.geometry)


def _empty_corridor(radius_km: float) -> Corridor:
    return Corridor(geometry=Polygon(), local_geometry=Polygon(), radius_km=radius_km)


def build_corridor(segment: Route, radius_km: float,
                   config: Optional[Config] = None) -> Corridor:
    """
    Buffer a route segment into a corridor polygon.

    The segment is reprojected into a local azimuthal equidistant frame,
    buffered there with round caps and joins, and projected back to lon/lat.
    The buffer distance is grown so the polygon's chords circumscribe the
    true offset curve, and again by the frame's stretch at the far end of
    the segment: every point within ``radius_km`` of the segment is covered.

    Args:
        segment: Route or RouteSegment to buffer
        radius_km: Corridor half-width in kilometers
        config: Configuration providing buffer resolution (uses defaults if None)

    Returns:
        Corridor; empty when the segment has no samples

    Raises:
        InvalidParameterError: If radius_km is not a positive finite number
        GeometryError: If buffering or reprojection fails
    """
    radius_km = validate_radius(radius_km)
    config = config or Config()

    if not segment.samples:
        return _empty_corridor(radius_km)

    if segment.is_degenerate:
        first = segment.samples[0]
        shape = Point(first.lon, first.lat)
    else:
        shape = LineString(segment.coordinates())

    bbox = get_bounding_box(s.latlon for s in segment.samples)
    lat0 = (bbox['south'] + bbox['north']) / 2.0
    lon0 = (bbox['west'] + bbox['east']) / 2.0

    quad_segs = config.quad_segs
    buffer_m = radius_km * 1000.0 / math.cos(math.pi / (4 * quad_segs))
    buffer_m *= distortion_factor(segment, lat0, lon0, radius_km)
    buffer_m *= 1.0 + CORRIDOR_SLACK

    try:
        crs = local_crs(lat0, lon0)
        local_shape = gpd.GeoSeries([shape], crs=WGS84).to_crs(crs).iloc[0]
        local_polygon = local_shape.buffer(buffer_m, quad_segs=quad_segs)
    except (GEOSException, ProjError, CRSError) as e:
        raise GeometryError(f"Could not buffer segment: {e}", stage="buffer") from e

    if local_polygon.is_empty or not local_polygon.is_valid:
        raise GeometryError(
            f"Buffer of {radius_km} km produced an unusable polygon", stage="buffer"
        )

    try:
        polygon = gpd.GeoSeries([local_polygon], crs=crs).to_crs(WGS84).iloc[0]
    except (GEOSException, ProjError, CRSError) as e:
        raise GeometryError(f"Could not reproject corridor: {e}", stage="reproject") from e

    if not polygon.is_valid:
        polygon = make_valid(polygon)
    if polygon.is_empty:
        raise GeometryError("Corridor vanished after reprojection", stage="reproject")

    logger.debug(
        "Built %.2f km corridor around %d samples (%.1f km²)",
        radius_km, len(segment.samples), local_polygon.area / 1e6,
    )
    return Corridor(
        geometry=polygon,
        local_geometry=local_polygon,
        radius_km=radius_km,
        crs=crs,
    )
