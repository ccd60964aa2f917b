"""Configuration management for route mapping."""

import configparser
from pathlib import Path
from typing import Optional, Tuple


class Config:
    """Parse and manage route analysis configuration."""

    # Default corridor settings (used if no config file provided)
    DEFAULT_CORRIDOR = {
        "radius_km": 5.0,
        "quad_segs": 16,
        "range_start_km": 0.0,
        "range_end_km": 20.0,
    }

    # Default Garmin symbol mappings per POI type
    DEFAULT_SYMBOLS = {
        "house": "Residence",
        "tent": "Campground",
        "hotel": "Lodging",
        "other": "Flag, Blue",
    }

    # Default display colors per POI type
    DEFAULT_COLORS = {
        "house": "#3399ff",
        "tent": "#ff7f50",
        "hotel": "#66cdaa",
    }

    FALLBACK_COLOR = "#ff7f50"

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to config.ini file. If None, uses defaults.
        """
        self.corridor = self.DEFAULT_CORRIDOR.copy()
        self.symbols = self.DEFAULT_SYMBOLS.copy()
        self.colors = self.DEFAULT_COLORS.copy()

        if config_file:
            self._load_config(config_file)

    def _load_config(self, config_file: str):
        """Load configuration from INI file."""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        parser = configparser.ConfigParser()
        parser.read(config_path)

        # Parse corridor settings
        if 'corridor' in parser:
            for key, value in parser['corridor'].items():
                if key not in self.DEFAULT_CORRIDOR:
                    continue
                cast = type(self.DEFAULT_CORRIDOR[key])
                try:
                    self.corridor[key] = cast(value)
                except ValueError:
                    pass

        # Parse Garmin symbols
        if 'garmin_symbols' in parser:
            for poi_type, symbol in parser['garmin_symbols'].items():
                self.symbols[poi_type] = symbol

        # Parse display colors
        if 'colors' in parser:
            for poi_type, color in parser['colors'].items():
                self.colors[poi_type] = color

    @property
    def radius_km(self) -> float:
        """Default corridor radius in kilometers."""
        return float(self.corridor["radius_km"])

    @property
    def quad_segs(self) -> int:
        """Number of buffer segments per quarter circle."""
        return max(1, int(self.corridor["quad_segs"]))

    def get_position_range(self) -> Tuple[float, float]:
        """Get the default route position range in kilometers."""
        return (
            float(self.corridor["range_start_km"]),
            float(self.corridor["range_end_km"]),
        )

    def get_garmin_symbol(self, poi_type: str) -> str:
        """Get Garmin symbol for a POI type."""
        return self.symbols.get(poi_type, "Flag, Blue")

    def get_color(self, poi_type: str) -> str:
        """Get display color for a POI type."""
        return self.colors.get(poi_type, self.FALLBACK_COLOR)
