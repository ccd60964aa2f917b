"""Writers for analysis results."""

from .tabular import export_csv, export_profile_csv, pois_to_frame
from .geojson import export_geojson, to_feature_collection
from .gpx import GpxExporter

__all__ = [
    "export_csv",
    "export_profile_csv",
    "pois_to_frame",
    "export_geojson",
    "to_feature_collection",
    "GpxExporter",
]
