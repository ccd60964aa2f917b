"""GPX export of a route segment with nearby POIs as waypoints."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import gpxpy.gpx

from ..analysis.analyzer import AnalysisResult
from ..core.config import Config


class GpxExporter:
    """Export an analysis result to a device-friendly GPX file."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize GPX Exporter.

        Args:
            config: Configuration object for symbol mappings (uses defaults if None)
        """
        self.config = config or Config()

    def build(self, result: AnalysisResult, use_closest: bool = False) -> gpxpy.gpx.GPX:
        """
        Build a GPX document for an analysis result.

        Args:
            result: Analysis result to export
            use_closest: Place waypoints on the route instead of at the POI

        Returns:
            GPX document with one track and one waypoint per POI
        """
        gpx = gpxpy.gpx.GPX()
        gpx.name = "Route corridor POIs"
        gpx.description = (
            f"POIs within {result.radius_km:g} km of km "
            f"{result.segment.start:.1f}-{result.segment.end:.1f} - "
            f"Generated {datetime.now().strftime('%Y-%m-%d')}"
        )

        if result.segment.samples:
            track = gpxpy.gpx.GPXTrack(name="Selected segment")
            track_segment = gpxpy.gpx.GPXTrackSegment()
            for sample in result.segment.samples:
                track_segment.points.append(gpxpy.gpx.GPXTrackPoint(
                    latitude=sample.lat,
                    longitude=sample.lon,
                    elevation=sample.elevation,
                ))
            track.segments.append(track_segment)
            gpx.tracks.append(track)

        for poi in result.pois:
            if use_closest and poi.closest_point is not None:
                lat, lon = poi.closest_point.lat, poi.closest_point.lon
            else:
                lat, lon = poi.lat, poi.lon

            poi_type = poi.type.value
            # Truncate long names for Garmin
            name = poi.name[:30] if poi.name else poi_type.capitalize()

            wpt = gpxpy.gpx.GPXWaypoint(latitude=lat, longitude=lon, name=name)
            wpt.symbol = self.config.get_garmin_symbol(poi_type)
            wpt.type = poi_type

            desc_parts = [f"Type: {poi_type}"]
            if poi.description:
                desc_parts.append(poi.description)
            if poi.min_distance is not None:
                desc_parts.append(f"{poi.min_distance:.2f} km off route")
            if poi.route_position is not None:
                desc_parts.append(f"at km {poi.route_position:.2f}")
            wpt.description = " | ".join(desc_parts)

            gpx.waypoints.append(wpt)

        return gpx

    def export_gpx(self, result: AnalysisResult, output_file: str,
                   use_closest: bool = False) -> str:
        """
        Export an analysis result to GPX format.

        Args:
            result: Analysis result to export
            output_file: Output GPX file path
            use_closest: Place waypoints on the route instead of at the POI

        Returns:
            Path to output file
        """
        gpx = self.build(result, use_closest=use_closest)

        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(gpx.to_xml())

        return str(output_path)
