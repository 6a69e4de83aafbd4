"""
Actual vapor pressure module.

Computes the mean daily actual vapor pressure (ea) from one of six data
availability scenarios of the ASCE-EWRI standardized method:

1. Direct: ea measured by the station
2. DewPoint: measured or estimated dewpoint temperature (Eq. 8)
3. MaxMinRelativeHumidity: RHmax and RHmin with Tmin and Tmax (Eq. 11)
4. DailyMaxRelativeHumidity: RHmax with Tmin (Eq. 12)
5. DailyMinRelativeHumidity: RHmin with Tmax (Eq. 13)
6. DailyMinAirTemperature: Tmin only, dewpoint approximated as Tmin - 3 °C
   (Appendix E)

Each scenario is its own immutable type that can only be constructed with
the fields its formula needs.
"""

import logging
import math
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, ClassVar, Optional

from ..core import constants
from ..exceptions import MissingRequiredFieldError
from ..models.observation import HumidityScale


def saturation_vapor_pressure(temperature: float) -> float:
    """
    Calculate saturation vapor pressure at a given temperature (Eq. 7).

    Args:
        temperature: Temperature (°C)

    Returns:
        Saturation vapor pressure (kPa)
    """
    return constants.TETENS_A * math.exp(
        (constants.TETENS_B * temperature) / (temperature + constants.TETENS_C)
    )


def normalize_relative_humidity(value: float, scale: HumidityScale = HumidityScale.AUTO) -> float:
    """
    Express a relative humidity value as a fraction (0-1).

    Args:
        value: Relative humidity
        scale: How the value is expressed; AUTO treats values > 1 as percent

    Returns:
        Relative humidity fraction
    """
    scale = HumidityScale.parse(scale)
    if scale is HumidityScale.PERCENT:
        return value / 100.0
    if scale is HumidityScale.FRACTION:
        return value
    return value / 100.0 if value > 1.0 else value


class VaporPressureMethod:
    """
    Base class for the actual vapor pressure scenarios.

    Subclasses are frozen dataclasses. Construction fails with
    MissingRequiredFieldError when a field the formula needs is omitted or
    None, and with InvalidInputError for an unknown humidity scale.
    """

    name: ClassVar[str] = "VaporPressureMethod"

    def __post_init__(self):
        for field in fields(self):
            if field.name == "scale":
                object.__setattr__(self, "scale", HumidityScale.parse(self.scale))
            elif getattr(self, field.name) is None:
                raise MissingRequiredFieldError(field.name, self.name)


@dataclass(frozen=True)
class Direct(VaporPressureMethod):
    """Actual vapor pressure measured directly (kPa)."""

    name: ClassVar[str] = "Direct"

    ea: Optional[float] = None


@dataclass(frozen=True)
class DewPoint(VaporPressureMethod):
    """Actual vapor pressure from dewpoint temperature (°C)."""

    name: ClassVar[str] = "DewPoint"

    tdew: Optional[float] = None


@dataclass(frozen=True)
class MaxMinRelativeHumidity(VaporPressureMethod):
    """Actual vapor pressure from both daily relative humidity extremes."""

    name: ClassVar[str] = "MaxMinRelativeHumidity"

    tmax: Optional[float] = None
    tmin: Optional[float] = None
    rhmax: Optional[float] = None
    rhmin: Optional[float] = None
    scale: HumidityScale = HumidityScale.AUTO


@dataclass(frozen=True)
class DailyMaxRelativeHumidity(VaporPressureMethod):
    """Actual vapor pressure from daily maximum relative humidity and Tmin."""

    name: ClassVar[str] = "DailyMaxRelativeHumidity"

    tmin: Optional[float] = None
    rhmax: Optional[float] = None
    scale: HumidityScale = HumidityScale.AUTO


@dataclass(frozen=True)
class DailyMinRelativeHumidity(VaporPressureMethod):
    """Actual vapor pressure from daily minimum relative humidity and Tmax."""

    name: ClassVar[str] = "DailyMinRelativeHumidity"

    tmax: Optional[float] = None
    rhmin: Optional[float] = None
    scale: HumidityScale = HumidityScale.AUTO


@dataclass(frozen=True)
class DailyMinAirTemperature(VaporPressureMethod):
    """Actual vapor pressure estimated from Tmin when no humidity data exists."""

    name: ClassVar[str] = "DailyMinAirTemperature"

    tmin: Optional[float] = None


class VaporPressureResolver:
    """
    Resolver for actual vapor pressure.

    Selects exactly one scenario from an observation, in the order
    Direct > DewPoint > MaxMinRelativeHumidity > DailyMaxRelativeHumidity >
    DailyMinRelativeHumidity > DailyMinAirTemperature, and evaluates it.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize vapor pressure resolver.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def select_method(self, observation: Any) -> VaporPressureMethod:
        """
        Choose the vapor pressure scenario supported by the observation's data.

        Args:
            observation: WeatherObservation

        Returns:
            The highest priority scenario whose fields are all present
        """
        scale = getattr(observation, "humidity_scale", HumidityScale.AUTO)

        if observation.ea is not None:
            method = Direct(ea=observation.ea)
        elif observation.dewpoint is not None:
            method = DewPoint(tdew=observation.dewpoint)
        elif observation.rhmax is not None and observation.rhmin is not None:
            method = MaxMinRelativeHumidity(
                tmax=observation.tmax,
                tmin=observation.tmin,
                rhmax=observation.rhmax,
                rhmin=observation.rhmin,
                scale=scale
            )
        elif observation.rhmax is not None:
            method = DailyMaxRelativeHumidity(
                tmin=observation.tmin, rhmax=observation.rhmax, scale=scale
            )
        elif observation.rhmin is not None:
            method = DailyMinRelativeHumidity(
                tmax=observation.tmax, rhmin=observation.rhmin, scale=scale
            )
        else:
            method = DailyMinAirTemperature(tmin=observation.tmin)

        self.logger.debug(f"Selected vapor pressure method: {method.name}")
        return method

    def resolve(self, method: VaporPressureMethod) -> float:
        """
        Calculate actual vapor pressure for a scenario.

        Args:
            method: Vapor pressure scenario

        Returns:
            Actual vapor pressure (kPa)

        Raises:
            MissingRequiredFieldError: If the scenario lacks a required field
        """
        # The bare base class carries no scenario
        if not isinstance(method, VaporPressureMethod) or not is_dataclass(method):
            raise MissingRequiredFieldError("vapor_pressure_method")

        # Re-check in case the instance was altered after construction
        for field in fields(method):
            if field.name != "scale" and getattr(method, field.name) is None:
                raise MissingRequiredFieldError(field.name, method.name)

        if isinstance(method, Direct):
            ea = method.ea
        elif isinstance(method, DewPoint):
            ea = saturation_vapor_pressure(method.tdew)
        elif isinstance(method, MaxMinRelativeHumidity):
            rhmax = self._normalize(method.rhmax, method.scale, "rhmax")
            rhmin = self._normalize(method.rhmin, method.scale, "rhmin")
            ea = (
                saturation_vapor_pressure(method.tmin) * rhmax +
                saturation_vapor_pressure(method.tmax) * rhmin
            ) / 2
        elif isinstance(method, DailyMaxRelativeHumidity):
            ea = saturation_vapor_pressure(method.tmin) * self._normalize(
                method.rhmax, method.scale, "rhmax"
            )
        elif isinstance(method, DailyMinRelativeHumidity):
            ea = saturation_vapor_pressure(method.tmax) * self._normalize(
                method.rhmin, method.scale, "rhmin"
            )
        elif isinstance(method, DailyMinAirTemperature):
            ea = saturation_vapor_pressure(method.tmin - constants.DEWPOINT_DEPRESSION)
        else:
            raise MissingRequiredFieldError("vapor_pressure_method", method.name)

        self.logger.debug(f"Actual vapor pressure ({method.name}): {ea:.4f} kPa")
        return ea

    def from_observation(self, observation: Any) -> float:
        """
        Select the scenario for an observation and calculate ea.

        Args:
            observation: WeatherObservation

        Returns:
            Actual vapor pressure (kPa)
        """
        return self.resolve(self.select_method(observation))

    def _normalize(self, value: float, scale: HumidityScale, field_name: str) -> float:
        if HumidityScale.parse(scale) is HumidityScale.AUTO and value == 1.0:
            self.logger.warning(
                f"{field_name}=1.0 is ambiguous (1% or 100%), treating it as a fraction"
            )
        return normalize_relative_humidity(value, scale)
