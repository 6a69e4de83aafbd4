"""
Unit conversion module.

Converts raw weather measurements to the canonical units used by the
reference ET engine: °C, kPa, MJ m⁻² day⁻¹, m/s, meters and radians.
"""

import logging
import math
from typing import Any, Dict, Optional

from ..exceptions import InvalidInputError


# Measurement field -> quantity kind
FIELD_KINDS = {
    "tmax": "temperature",
    "tmin": "temperature",
    "dewpoint": "temperature",
    "ea": "pressure",
    "rs": "radiation",
    "ws": "wind_speed",
    "wz": "length",
    "z": "length",
    "latitude": "angle",
}

LANGLEY_TO_MJ = 0.04184  # ly/day -> MJ m⁻² day⁻¹
WATTS_TO_MJ = 0.0864  # mean W m⁻² -> MJ m⁻² day⁻¹
MPH_TO_MS = 0.44704
KNOTS_TO_MS = 0.514444
FEET_TO_METERS = 0.3048


class UnitConverter:
    """Convert between different meteorological units."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        default_units: Optional[Dict[str, str]] = None
    ):
        """
        Initialize unit converter.

        Args:
            logger: Logger instance
            default_units: Unit label per quantity kind, used when a
                           measurement has no explicit unit
        """
        self.logger = logger or logging.getLogger(__name__)
        self.default_units = default_units or {}

    def convert_units(
        self,
        measurements: Dict[str, Any],
        source_units: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Convert raw measurements to canonical units.

        Target units:
        - Temperature (tmax, tmin, dewpoint): °C
        - Vapor pressure (ea): kPa
        - Solar radiation (rs): MJ m⁻² day⁻¹
        - Wind speed (ws): m/s
        - Heights (wz, z): meters
        - Latitude: radians

        Args:
            measurements: Dictionary with raw values keyed by field name
            source_units: Unit labels keyed by field name or quantity kind.
                          A field-level label takes precedence.

        Returns:
            New dictionary with converted values; unknown keys and None
            values are passed through unchanged
        """
        source_units = source_units or {}
        converted = dict(measurements)

        for field, kind in FIELD_KINDS.items():
            value = converted.get(field)
            if value is None:
                continue

            unit = source_units.get(field) or source_units.get(kind) or self.default_units.get(kind)
            if unit is None:
                raise InvalidInputError(f"No unit given for {field}")

            self.logger.debug(f"Converting {field}={value} from {unit}")
            converted[field] = self.convert(kind, value, unit)

        return converted

    def convert(self, kind: str, value: float, unit: str) -> float:
        """
        Convert a single value of the given quantity kind to canonical units.

        Args:
            kind: Quantity kind (temperature, pressure, radiation, wind_speed, length, angle)
            value: Raw value
            unit: Unit label of the raw value

        Returns:
            Converted value
        """
        if kind == "temperature":
            return self.convert_temperature(value, unit, "celsius")
        if kind == "pressure":
            return self.convert_pressure(value, unit, "kPa")
        if kind == "radiation":
            return self.convert_radiation(value, unit)
        if kind == "wind_speed":
            return self.convert_wind_speed(value, unit, "m/s")
        if kind == "length":
            return self.convert_length(value, unit)
        if kind == "angle":
            return self.convert_angle(value, unit)
        raise InvalidInputError(f"Unknown quantity kind: {kind}")

    def convert_temperature(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert temperature between units.

        Args:
            value: Temperature value
            from_unit: Source unit (celsius, fahrenheit, kelvin)
            to_unit: Target unit

        Returns:
            Converted temperature value
        """
        from_lower = from_unit.strip().lower().lstrip("°")
        to_lower = to_unit.strip().lower().lstrip("°")
        if from_lower == to_lower:
            return value

        # Convert to Celsius first
        if from_lower.startswith("f"):
            celsius = (value - 32) * 5 / 9
        elif from_lower.startswith("k"):
            celsius = value - 273.15
        elif from_lower.startswith("c"):
            celsius = value
        else:
            raise InvalidInputError(f"Unknown temperature unit: {from_unit}")

        if to_lower.startswith("f"):
            return celsius * 9 / 5 + 32
        elif to_lower.startswith("k"):
            return celsius + 273.15
        return celsius

    def convert_wind_speed(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert wind speed between units.

        Args:
            value: Wind speed value
            from_unit: Source unit (m/s, km/h, mph, knots)
            to_unit: Target unit

        Returns:
            Converted wind speed value
        """
        if from_unit == to_unit:
            return value

        # Convert to m/s first
        from_unit_lower = from_unit.strip().lower()
        if from_unit_lower in ["km/h", "kmh", "kph"]:
            ms = value / 3.6
        elif from_unit_lower in ["mph", "mi/h"]:
            ms = value * MPH_TO_MS
        elif from_unit_lower in ["knots", "kt", "kn"]:
            ms = value * KNOTS_TO_MS
        elif from_unit_lower in ["m/s", "mps", "ms", "m s-1"]:
            ms = value
        else:
            raise InvalidInputError(f"Unknown wind speed unit: {from_unit}")

        # Convert from m/s to target
        to_unit_lower = to_unit.strip().lower()
        if to_unit_lower in ["km/h", "kmh", "kph"]:
            return ms * 3.6
        elif to_unit_lower in ["mph", "mi/h"]:
            return ms / MPH_TO_MS
        elif to_unit_lower in ["knots", "kt", "kn"]:
            return ms / KNOTS_TO_MS
        else:
            return ms

    def convert_pressure(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert vapor/air pressure between units.

        Args:
            value: Pressure value
            from_unit: Source unit (kPa, hPa, mbar, Pa)
            to_unit: Target unit

        Returns:
            Converted pressure value
        """
        if from_unit == to_unit:
            return value

        # Convert to kPa first
        from_unit_lower = from_unit.strip().lower()
        if from_unit_lower in ["kpa", "kilopascal", "kilopascals"]:
            kpa = value
        elif from_unit_lower in ["hpa", "hectopascal", "mbar", "millibar"]:
            kpa = value / 10
        elif from_unit_lower.startswith("p"):
            kpa = value / 1000
        else:
            raise InvalidInputError(f"Unknown pressure unit: {from_unit}")

        # Convert from kPa to target
        to_unit_lower = to_unit.strip().lower()
        if to_unit_lower in ["hpa", "hectopascal", "mbar", "millibar"]:
            return kpa * 10
        elif to_unit_lower in ["pa", "pascal", "pascals"]:
            return kpa * 1000
        else:
            return kpa

    def convert_radiation(self, value: float, from_unit: str) -> float:
        """
        Convert daily solar radiation to MJ m⁻² day⁻¹.

        Args:
            value: Radiation value
            from_unit: Source unit (langley, watt, MJ)

        Returns:
            Radiation in MJ m⁻² day⁻¹
        """
        from_unit_lower = from_unit.strip().lower()
        if from_unit_lower.startswith("l"):
            return value * LANGLEY_TO_MJ
        if from_unit_lower.startswith("w"):
            return value * WATTS_TO_MJ
        if from_unit_lower.startswith("mj"):
            return value
        raise InvalidInputError(f"Unknown radiation unit: {from_unit}")

    def convert_length(self, value: float, from_unit: str) -> float:
        """
        Convert a height or elevation to meters.

        Args:
            value: Length value
            from_unit: Source unit (feet, meters)

        Returns:
            Length in meters
        """
        from_unit_lower = from_unit.strip().lower()
        if from_unit_lower in ["ft", "feet", "foot"]:
            return value * FEET_TO_METERS
        if from_unit_lower in ["m", "meter", "meters", "metre", "metres"]:
            return value
        raise InvalidInputError(f"Unknown length unit: {from_unit}")

    def convert_angle(self, value: float, from_unit: str) -> float:
        """
        Convert an angle to radians.

        Args:
            value: Angle value
            from_unit: Source unit (degrees, radians)

        Returns:
            Angle in radians
        """
        from_unit_lower = from_unit.strip().lower()
        if from_unit_lower in ["deg", "degree", "degrees", "°"]:
            return math.radians(value)
        if from_unit_lower in ["rad", "radian", "radians"]:
            return value
        raise InvalidInputError(f"Unknown angle unit: {from_unit}")
