"""
Reference ET result models.

Contains the container for the intermediate quantities of one evaluation.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class ReferenceETComponents:
    """Intermediate values and results of one reference ET evaluation."""

    # Final results
    et_short: float  # Short (grass) reference ET (mm/day)
    et_tall: float  # Tall (alfalfa) reference ET (mm/day)

    # Psychrometric parameters
    atmospheric_pressure: float  # kPa
    gamma: float  # Psychrometric constant (kPa/°C)
    tmean: float  # °C
    delta: float  # Slope of vapor pressure curve (kPa/°C)

    # Vapor pressure parameters
    es: float  # Mean saturation vapor pressure (kPa)
    ea: float  # Actual vapor pressure (kPa)
    vapor_pressure_method: str

    # Solar geometry
    day_of_year: int
    dr: float  # Inverse relative Earth-Sun distance
    solar_declination: float  # radians
    sunset_hour_angle: float  # radians

    # Radiation parameters (MJ m⁻² day⁻¹ unless noted)
    ra: float
    rso: float
    rs: float
    rs_estimated: bool  # True when rs came from Hargreaves-Samani
    fcd: float  # Cloudiness function (dimensionless)
    rnl: float
    rns: float
    rn: float

    # Wind
    u2: float  # m/s at 2m height

    @property
    def vpd(self) -> float:
        """Vapor pressure deficit (kPa)."""
        return self.es - self.ea

    def to_dict(self) -> Dict[str, Any]:
        """Return all values as a plain dictionary."""
        return asdict(self)
