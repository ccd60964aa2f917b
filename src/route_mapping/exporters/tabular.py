"""CSV export of enriched POIs and elevation profiles."""

from pathlib import Path
from typing import Sequence

import pandas as pd

from ..pois.models import POI
from ..route.models import ProfilePoint

POI_COLUMNS = [
    'id', 'name', 'type', 'description', 'lat', 'lon',
    'min_distance_km', 'route_position_km', 'closest_lat', 'closest_lon',
]


def pois_to_frame(pois: Sequence[POI]) -> pd.DataFrame:
    """Flatten enriched POIs into a DataFrame, one row per POI."""
    rows = []
    for poi in pois:
        closest = poi.closest_point
        rows.append({
            'id': poi.id,
            'name': poi.name,
            'type': poi.type.value,
            'description': poi.description,
            'lat': poi.lat,
            'lon': poi.lon,
            'min_distance_km': poi.min_distance,
            'route_position_km': poi.route_position,
            'closest_lat': closest.lat if closest else None,
            'closest_lon': closest.lon if closest else None,
        })
    return pd.DataFrame(rows, columns=POI_COLUMNS)


def export_csv(pois: Sequence[POI], output_file: str) -> str:
    """
    Save enriched POIs to a CSV file.

    Args:
        pois: Enriched POIs
        output_file: Path to output CSV file

    Returns:
        Path to output file
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    pois_to_frame(pois).to_csv(output_path, index=False)
    return str(output_path)


def export_profile_csv(profile: Sequence[ProfilePoint], output_file: str) -> str:
    """Save an elevation profile as ``distance_km,elevation_m`` rows."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(
        [(p.distance, p.elevation) for p in profile],
        columns=['distance_km', 'elevation_m'],
    )
    df.to_csv(output_path, index=False)
    return str(output_path)
