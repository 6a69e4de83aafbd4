"""
Data models for reference evapotranspiration.

Contains the weather observation and result containers.
"""

from .observation import HumidityScale, WeatherObservation
from .components import ReferenceETComponents

__all__ = [
    "HumidityScale",
    "WeatherObservation",
    "ReferenceETComponents",
]
