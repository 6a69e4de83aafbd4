"""
Calculation algorithms for reference evapotranspiration.

Provides the actual vapor pressure resolver, the radiation model and the
standardized Penman-Monteith calculator.
"""

from .vapor_pressure import (
    VaporPressureMethod,
    Direct,
    DewPoint,
    MaxMinRelativeHumidity,
    DailyMaxRelativeHumidity,
    DailyMinRelativeHumidity,
    DailyMinAirTemperature,
    VaporPressureResolver,
    saturation_vapor_pressure,
    normalize_relative_humidity,
)
from .radiation import RadiationModel
from .penman_monteith import ReferenceETCalculator, calculate_ref_et
from .calculator import EvapotranspirationCalculator

__all__ = [
    "VaporPressureMethod",
    "Direct",
    "DewPoint",
    "MaxMinRelativeHumidity",
    "DailyMaxRelativeHumidity",
    "DailyMinRelativeHumidity",
    "DailyMinAirTemperature",
    "VaporPressureResolver",
    "saturation_vapor_pressure",
    "normalize_relative_humidity",
    "RadiationModel",
    "ReferenceETCalculator",
    "calculate_ref_et",
    "EvapotranspirationCalculator",
]
