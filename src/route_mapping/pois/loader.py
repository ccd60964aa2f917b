"""Load POI source sets from CSV or JSON files."""

import json
import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..core.errors import ParseError
from .models import POI, PoiType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("id", "name", "lat", "lon")


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        try:
            return pd.read_csv(path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise ParseError(f"Could not read POI CSV {path}: {e}") from e
    if suffix in (".json", ".geojson"):
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ParseError(f"Could not read POI JSON {path}: {e}") from e
        if isinstance(data, dict) and "pois" in data:
            data = data["pois"]
        if not isinstance(data, list):
            raise ParseError(f"POI JSON {path} must contain a list of objects")
        return pd.DataFrame.from_records(data)
    raise ParseError(f"Unsupported POI file type: {path.suffix}")


def pois_from_frame(df: pd.DataFrame) -> List[POI]:
    """
    Convert a DataFrame of POI rows into POI records.

    Rows with missing or out-of-range coordinates are skipped with a warning.

    Raises:
        ParseError: If a required column is missing
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ParseError(f"POI data is missing required columns: {', '.join(missing)}")

    lats = pd.to_numeric(df["lat"], errors="coerce")
    lons = pd.to_numeric(df["lon"], errors="coerce")
    valid = lats.between(-90, 90) & lons.between(-180, 180)

    skipped = int((~valid).sum())
    if skipped:
        logger.warning("Skipping %d POI rows with missing or out-of-range coordinates", skipped)

    pois = []
    for row, lat, lon in zip(df[valid].to_dict("records"), lats[valid], lons[valid]):
        name = row["name"]
        description = row.get("description")
        poi_type = row.get("type")
        pois.append(POI(
            id=row["id"],
            name="" if pd.isna(name) else str(name),
            lat=float(lat),
            lon=float(lon),
            description="" if description is None or pd.isna(description) else str(description),
            type=PoiType.OTHER if poi_type is None or pd.isna(poi_type) else PoiType.parse(poi_type),
        ))

    ids = [poi.id for poi in pois]
    if len(set(ids)) != len(ids):
        logger.warning("POI set contains duplicate ids; results are keyed by id")

    return pois


def load_pois(poi_file) -> List[POI]:
    """
    Load POIs from a CSV or JSON file.

    Args:
        poi_file: Path to a ``.csv`` or ``.json`` file with columns
            id, name, lat, lon and optional description, type

    Returns:
        List of POIs in file order
    """
    path = Path(poi_file)
    if not path.exists():
        raise FileNotFoundError(f"POI file not found: {poi_file}")

    pois = pois_from_frame(_read_frame(path))
    logger.debug("Loaded %d POIs from %s", len(pois), path)
    return pois
