"""
ASCE Standardized Reference Evapotranspiration

This package computes daily reference ET for the short (grass) and tall
(alfalfa) reference surfaces using the ASCE-EWRI standardized
Penman-Monteith equation.
"""

__version__ = "0.1.0"
__description__ = "ASCE standardized reference evapotranspiration"


def __getattr__(name):
    """Lazy import to avoid importing the engine when only metadata is needed."""
    if name == "calculate_ref_et":
        from .algorithms import calculate_ref_et
        return calculate_ref_et
    if name == "EvapotranspirationCalculator":
        from .algorithms import EvapotranspirationCalculator
        return EvapotranspirationCalculator
    if name == "WeatherObservation":
        from .models import WeatherObservation
        return WeatherObservation
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "calculate_ref_et",
    "EvapotranspirationCalculator",
    "WeatherObservation",
]
