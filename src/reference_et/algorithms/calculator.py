"""
Reference ET calculator facade.

This module provides a simplified interface to the Penman-Monteith engine,
handling unit conversion of raw measurements, location metadata and
configuration defaults.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

from ..core import Config, DateUtils, LoggerContext, setup_logger
from ..models import ReferenceETComponents, WeatherObservation
from ..processing import DataProcessor
from .penman_monteith import ReferenceETCalculator


class EvapotranspirationCalculator:
    """
    High-level calculator for daily reference ET.

    This class acts as a facade, providing a clean interface to the
    Penman-Monteith engine while handling data extraction and unit mapping.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, config: Optional[Config] = None):
        """
        Initialize reference ET calculator.

        Args:
            logger: Logger instance; when None one is set up from the
                    configuration's logging level and file
            config: Configuration; built-in defaults are used when None
        """
        self.config = config or Config()
        self.logger = logger or setup_logger(
            log_file=self.config.log_file, log_level=self.config.log_level
        )
        self.engine = ReferenceETCalculator(self.logger)
        self.processor = DataProcessor(self.logger, self.config.default_units)
        self.date_utils = DateUtils(self.logger)

    def calculate(self, observation: WeatherObservation) -> Tuple[float, float]:
        """
        Calculate short and tall reference ET for an observation.

        Args:
            observation: Validated daily weather observation

        Returns:
            Tuple of (et_short, et_tall) in mm/day
        """
        self.logger.debug("Calculating reference ET using ASCE standardized Penman-Monteith")

        try:
            et_short, et_tall = self.engine.calculate_ref_et(observation)

            self.logger.debug(
                f"Calculated reference ET: short={et_short:.2f} mm/day, tall={et_tall:.2f} mm/day"
            )
            return et_short, et_tall

        except Exception as e:
            self.logger.error(f"Error calculating reference ET: {e}", exc_info=True)
            raise

    def calculate_with_components(self, observation: WeatherObservation) -> ReferenceETComponents:
        """
        Calculate reference ET with detailed intermediate components.

        Args:
            observation: Validated daily weather observation

        Returns:
            ReferenceETComponents containing all intermediate values
        """
        self.logger.debug("Calculating reference ET with component details")

        try:
            components = self.engine.calculate_with_components(observation)

            self.logger.debug(
                f"Calculated reference ET: short={components.et_short:.2f} mm/day, "
                f"tall={components.et_tall:.2f} mm/day "
                f"(ea method={components.vapor_pressure_method}, Rn={components.rn:.2f})"
            )
            return components

        except Exception as e:
            self.logger.error(f"Error calculating reference ET components: {e}", exc_info=True)
            raise

    def build_observation(
        self,
        measurements: Dict[str, Any],
        units: Optional[Dict[str, str]],
        location_metadata: Dict[str, Any],
        observation_date: Union[str, date]
    ) -> WeatherObservation:
        """
        Build a validated observation from raw measurements and location metadata.

        Latitude and elevation are read from ``location_metadata["location"]``
        (keys ``latitude`` and ``elevation``) unless present in measurements.

        Args:
            measurements: Raw measured values keyed by field name
            units: Unit labels keyed by field name or quantity kind
            location_metadata: Location metadata including latitude/elevation
            observation_date: Date of the observation

        Returns:
            WeatherObservation in canonical units
        """
        location = location_metadata.get("location", {})
        merged = dict(measurements)
        merged.setdefault("latitude", location.get("latitude"))
        merged.setdefault("z", location.get("elevation"))

        return WeatherObservation.from_measurements(
            merged,
            units=units,
            observation_date=observation_date,
            humidity_scale=self.config.humidity_scale,
            default_wind_height=self.config.default_wind_height,
            converter=self.processor.converter
        )

    def calculate_with_metadata(
        self,
        measurements: Dict[str, Any],
        units: Optional[Dict[str, str]],
        location_metadata: Dict[str, Any],
        observation_date: Union[str, date]
    ) -> Tuple[float, float]:
        """
        Calculate reference ET from raw measurements and location metadata.

        Args:
            measurements: Raw measured values, e.g.:
                - tmax, tmin: Temperature extremes
                - ea / dewpoint / rhmax / rhmin: Humidity data (optional)
                - rs: Measured solar radiation (optional)
                - ws, wz: Wind speed and measurement height
            units: Unit labels keyed by field name or quantity kind
            location_metadata: Location metadata including latitude/elevation
            observation_date: Date of the observation

        Returns:
            Tuple of (et_short, et_tall) in mm/day
        """
        with LoggerContext(self.logger, f"reference ET for {observation_date}"):
            try:
                observation = self.build_observation(
                    measurements, units, location_metadata, observation_date
                )
            except Exception as e:
                self.logger.error(f"Invalid observation for {observation_date}: {e}")
                raise

            self.logger.info(
                f"Reference ET calculation parameters - "
                f"Date: {self.date_utils.format_date(observation.date)}, "
                f"T_min: {observation.tmin:.2f}°C, "
                f"T_max: {observation.tmax:.2f}°C, "
                f"Wind: {observation.ws if observation.ws is not None else 'n/a'} m/s "
                f"at {observation.wz:.2f} m, "
                f"Rs: {observation.rs if observation.rs is not None else 'estimated'}, "
                f"Lat: {observation.latitude:.4f} rad, "
                f"Alt: {observation.z:.1f}m, "
                f"Day: {observation.day_of_year}"
            )

            return self.calculate(observation)
