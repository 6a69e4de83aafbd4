"""
Observation validation module.

Validates a daily weather observation before any computation begins.
"""

import logging
import math
from datetime import date
from typing import Any, List, Optional, Tuple


class ObservationValidator:
    """Validate a daily weather observation in canonical units."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize observation validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate(self, observation: Any) -> Tuple[bool, List[str]]:
        """
        Validate that observation values are present and in valid ranges.

        Args:
            observation: WeatherObservation (or any object with the same attributes)

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        for field in ("tmax", "tmin", "z", "latitude"):
            value = getattr(observation, field, None)
            if value is None:
                errors.append(f"Missing required field: {field}")
            elif not self._is_finite(value):
                errors.append(f"Invalid {field}: {value} (must be a finite number)")

        tmax = observation.tmax
        tmin = observation.tmin
        if self._is_finite(tmax) and self._is_finite(tmin) and tmin > tmax:
            errors.append(f"tmin ({tmin}) cannot be greater than tmax ({tmax})")

        latitude = observation.latitude
        if self._is_finite(latitude) and not (-math.pi / 2 <= latitude <= math.pi / 2):
            errors.append(
                f"Invalid latitude: {latitude} rad (must be between -90 and 90 degrees)"
            )

        z = observation.z
        if self._is_finite(z) and z <= 0:
            errors.append(f"Invalid elevation: {z} m (must be > 0)")

        for field, label in (("wz", "wind height"), ("rs", "solar radiation"),
                             ("ea", "actual vapor pressure")):
            value = getattr(observation, field, None)
            if value is None:
                continue
            if not self._is_finite(value) or value <= 0:
                errors.append(f"Invalid {label}: {value} (must be > 0)")

        ws = getattr(observation, "ws", None)
        if ws is not None and (not self._is_finite(ws) or ws <= 0):
            errors.append(f"Invalid wind speed: {ws} (must be > 0)")

        dewpoint = getattr(observation, "dewpoint", None)
        if dewpoint is not None and not self._is_finite(dewpoint):
            errors.append(f"Invalid dewpoint: {dewpoint} (must be a finite number)")

        errors.extend(self._validate_humidity(observation))

        if not isinstance(getattr(observation, "date", None), date):
            errors.append(f"Invalid date: {getattr(observation, 'date', None)!r}")

        is_valid = len(errors) == 0
        if not is_valid:
            self.logger.debug(f"Observation failed validation: {errors}")
        return is_valid, errors

    def _validate_humidity(self, observation: Any) -> List[str]:
        """Check relative humidity values against the observation's scale."""
        errors = []
        scale = getattr(observation, "humidity_scale", None)
        scale_name = getattr(scale, "value", scale) or "auto"

        for field in ("rhmax", "rhmin"):
            value = getattr(observation, field, None)
            if value is None:
                continue
            if not self._is_finite(value) or value < 0:
                errors.append(f"Invalid {field}: {value} (must be >= 0)")
                continue

            upper = 1.0 if scale_name == "fraction" else 100.0
            if value > upper:
                errors.append(f"Invalid {field}: {value} (must be <= {upper:g})")

        return errors

    @staticmethod
    def _is_finite(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
