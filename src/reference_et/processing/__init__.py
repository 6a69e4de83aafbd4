"""
Data processing module for reference evapotranspiration.

Provides unit conversion and validation of weather observations.
"""

import logging
from typing import Dict, Any, List, Optional, Tuple

from .converter import UnitConverter
from .validator import ObservationValidator


class DataProcessor:
    """
    Unified data processor combining conversion and validation.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        default_units: Optional[Dict[str, str]] = None
    ):
        """
        Initialize data processor.

        Args:
            logger: Logger instance
            default_units: Unit label per quantity kind for unlabelled measurements
        """
        self.logger = logger or logging.getLogger(__name__)
        self.converter = UnitConverter(logger, default_units)
        self.validator = ObservationValidator(logger)

    def convert_units(
        self,
        measurements: Dict[str, Any],
        source_units: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Convert raw measurements to canonical units.

        Args:
            measurements: Dictionary with raw values
            source_units: Dictionary mapping field names or kinds to their source units

        Returns:
            Dictionary with converted values
        """
        return self.converter.convert_units(measurements, source_units)

    def validate_observation(self, observation: Any) -> Tuple[bool, List[str]]:
        """
        Validate an observation.

        Args:
            observation: Weather observation

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        return self.validator.validate(observation)


__all__ = [
    "UnitConverter",
    "ObservationValidator",
    "DataProcessor",
]
