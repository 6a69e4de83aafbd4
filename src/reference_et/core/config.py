"""
Configuration module for reference evapotranspiration calculations.

Loads configuration from an optional JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_HUMIDITY_SCALES = ("auto", "percent", "fraction")

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "file": None,
    },
    "humidity": {
        "scale": "auto",
    },
    "wind": {
        "default_height": constants.REFERENCE_WIND_HEIGHT,
    },
    "units": {
        "temperature": "celsius",
        "pressure": "kPa",
        "radiation": "MJ",
        "wind_speed": "m/s",
        "length": "meters",
        "angle": "degrees",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var;
                        when neither is set the built-in defaults are used
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self.config_file:
            return

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError("Configuration file must contain a JSON object")
        self.config = _merge(self.config, loaded)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config["logging"]["file"] = os.getenv("LOG_FILE")

        if os.getenv("HUMIDITY_SCALE"):
            self.config["humidity"]["scale"] = os.getenv("HUMIDITY_SCALE")

        if os.getenv("WIND_HEIGHT"):
            try:
                self.config["wind"]["default_height"] = float(os.getenv("WIND_HEIGHT"))
            except ValueError:
                raise ValueError(f"Invalid WIND_HEIGHT: {os.getenv('WIND_HEIGHT')}")

    def _validate_config(self) -> None:
        """Validate configuration values."""
        level = str(self.get("logging.level", "INFO")).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid logging.level: {level} (expected one of {', '.join(VALID_LOG_LEVELS)})"
            )

        scale = str(self.get("humidity.scale", "auto")).lower()
        if scale not in VALID_HUMIDITY_SCALES:
            raise ValueError(
                f"Invalid humidity.scale: {scale} "
                f"(expected one of {', '.join(VALID_HUMIDITY_SCALES)})"
            )

        height = self.get("wind.default_height")
        if not isinstance(height, (int, float)) or height <= 0:
            raise ValueError(f"wind.default_height must be a positive number, got {height}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'humidity.scale')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return str(self.get("logging.level", "INFO")).upper()

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    @property
    def humidity_scale(self) -> str:
        """Get relative humidity scale (auto, percent or fraction)."""
        return str(self.get("humidity.scale", "auto")).lower()

    @property
    def default_wind_height(self) -> float:
        """Get wind measurement height used when none is supplied (m)."""
        return float(self.get("wind.default_height", constants.REFERENCE_WIND_HEIGHT))

    @property
    def default_units(self) -> Dict[str, str]:
        """Get default unit labels for measurements without an explicit unit."""
        return dict(self.get("units", {}))

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, humidity_scale={self.humidity_scale})"
