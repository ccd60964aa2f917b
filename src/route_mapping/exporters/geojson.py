"""GeoJSON export of an analysis result for map rendering."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from shapely.geometry import LineString, Point, mapping

from ..analysis.analyzer import AnalysisResult
from ..core.config import Config


def to_feature_collection(result: AnalysisResult,
                          config: Optional[Config] = None) -> Dict[str, Any]:
    """
    Build a FeatureCollection with the segment, corridor and enriched POIs.

    Coordinates follow GeoJSON axis order (lon, lat).
    """
    config = config or Config()
    features = []

    segment = result.segment
    if len(segment.samples) >= 2:
        features.append({
            "type": "Feature",
            "geometry": mapping(LineString(segment.coordinates())),
            "properties": {
                "type": "segment",
                "start_km": round(segment.start, 3),
                "end_km": round(segment.end, 3),
                "length_km": round(segment.total_length, 3),
            },
        })

    if not result.corridor.is_empty:
        features.append({
            "type": "Feature",
            "geometry": result.corridor.to_geojson(),
            "properties": {
                "type": "corridor",
                "radius_km": result.radius_km,
                "color": "#ff7800",
            },
        })

    for poi in result.pois:
        properties = {
            "type": "poi",
            "id": poi.id,
            "name": poi.name,
            "description": poi.description,
            "poi_type": poi.type.value,
            "color": config.get_color(poi.type.value),
            "min_distance_km": poi.min_distance,
            "route_position_km": poi.route_position,
        }
        if poi.closest_point is not None:
            properties["closest_point"] = [poi.closest_point.lon, poi.closest_point.lat]
        features.append({
            "type": "Feature",
            "geometry": mapping(Point(poi.lon, poi.lat)),
            "properties": properties,
        })

    return {"type": "FeatureCollection", "features": features}


def export_geojson(result: AnalysisResult, output_file: str,
                   config: Optional[Config] = None) -> str:
    """
    Write an analysis result to a GeoJSON file.

    Returns:
        Path to output file
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(to_feature_collection(result, config), f, indent=2)
    return str(output_path)
