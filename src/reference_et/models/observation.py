"""
Weather observation data models.

Contains the daily observation consumed by the reference ET engine. All
values are in canonical units: °C, kPa, MJ m⁻² day⁻¹, m/s, meters and
radians.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..core import constants
from ..core.date_utils import DateUtils
from ..exceptions import InvalidInputError
from ..processing.converter import UnitConverter
from ..processing.validator import ObservationValidator


class HumidityScale(str, Enum):
    """How relative humidity values are expressed."""

    AUTO = "auto"  # values > 1 are percent, values <= 1 are fractions
    PERCENT = "percent"
    FRACTION = "fraction"

    @classmethod
    def parse(cls, value: Union[str, "HumidityScale"]) -> "HumidityScale":
        """Parse a scale label, raising InvalidInputError for unknown labels."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidInputError(
                f"Invalid humidity scale: {value!r} (expected auto, percent or fraction)"
            )


@dataclass(frozen=True)
class WeatherObservation:
    """One day of weather data at a station, validated on construction."""

    tmax: float  # Maximum air temperature (°C)
    tmin: float  # Minimum air temperature (°C)
    z: float  # Station elevation (m)
    latitude: float  # Latitude (radians)
    date: date  # Calendar date of the observation
    ea: Optional[float] = None  # Measured actual vapor pressure (kPa)
    dewpoint: Optional[float] = None  # Dewpoint temperature (°C)
    rhmax: Optional[float] = None  # Maximum relative humidity (% or fraction)
    rhmin: Optional[float] = None  # Minimum relative humidity (% or fraction)
    rs: Optional[float] = None  # Measured solar radiation (MJ m⁻² day⁻¹)
    ws: Optional[float] = None  # Wind speed at height wz (m/s)
    wz: float = constants.REFERENCE_WIND_HEIGHT  # Wind measurement height (m)
    humidity_scale: HumidityScale = HumidityScale.AUTO

    def __post_init__(self):
        object.__setattr__(self, "humidity_scale", HumidityScale.parse(self.humidity_scale))
        if self.date is not None:
            object.__setattr__(self, "date", DateUtils.parse_date(self.date))

        is_valid, errors = ObservationValidator().validate(self)
        if not is_valid:
            raise InvalidInputError(
                f"Invalid weather observation: {'; '.join(errors)}", errors
            )

    @property
    def day_of_year(self) -> int:
        """Day of year (1-365/366) of the observation date."""
        return DateUtils.day_of_year(self.date)

    @classmethod
    def from_measurements(
        cls,
        measurements: Dict[str, Any],
        units: Optional[Dict[str, str]] = None,
        observation_date: Optional[Union[str, date]] = None,
        humidity_scale: Union[str, HumidityScale] = HumidityScale.AUTO,
        default_wind_height: float = constants.REFERENCE_WIND_HEIGHT,
        converter: Optional[UnitConverter] = None
    ) -> "WeatherObservation":
        """
        Build an observation from raw measurements and their unit labels.

        Args:
            measurements: Raw values keyed by field name (tmax, tmin, ea,
                          dewpoint, rhmax, rhmin, rs, ws, wz, z, latitude,
                          optionally date)
            units: Unit labels keyed by field name or quantity kind
            observation_date: Date of the observation; overrides measurements["date"]
            humidity_scale: Scale of rhmax/rhmin
            default_wind_height: Wind height used when wz is not supplied (m)
            converter: UnitConverter instance

        Returns:
            Validated WeatherObservation
        """
        converter = converter or UnitConverter()
        converted = converter.convert_units(measurements, units)

        obs_date = observation_date if observation_date is not None else converted.get("date")
        if obs_date is None:
            raise InvalidInputError("Missing required field: date", ["Missing required field: date"])

        wz = converted.get("wz")
        return cls(
            tmax=converted.get("tmax"),
            tmin=converted.get("tmin"),
            z=converted.get("z"),
            latitude=converted.get("latitude"),
            date=obs_date,
            ea=converted.get("ea"),
            dewpoint=converted.get("dewpoint"),
            rhmax=converted.get("rhmax"),
            rhmin=converted.get("rhmin"),
            rs=converted.get("rs"),
            ws=converted.get("ws"),
            wz=wz if wz is not None else default_wind_height,
            humidity_scale=humidity_scale,
        )
