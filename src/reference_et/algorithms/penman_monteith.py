"""
ASCE-EWRI standardized Penman-Monteith reference ET module.

Evaluates daily reference evapotranspiration for the short (clipped grass)
and tall (alfalfa) reference surfaces:

    ET = (0.408 Δ (Rn - G) + γ (Cn / (T + 273)) u2 (es - ea)) / (Δ + γ (1 + Cd u2))

with Cn/Cd = 900/0.34 for the short and 1600/0.38 for the tall surface, and
G = 0 for a daily time step.

Reference:
    ASCE-EWRI (2005). The ASCE Standardized Reference Evapotranspiration
    Equation.
"""

import logging
from typing import Optional, Tuple

from ..core import constants
from ..exceptions import MissingRequiredFieldError
from ..models import ReferenceETComponents, WeatherObservation
from .radiation import RadiationModel
from .vapor_pressure import VaporPressureResolver


class ReferenceETCalculator:
    """
    Calculator for daily reference ET using the standardized Penman-Monteith equation.

    Every call computes its intermediate quantities from scratch; nothing is
    shared between calls.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize reference ET calculator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = VaporPressureResolver(self.logger)

    def calculate_ref_et(self, observation: WeatherObservation) -> Tuple[float, float]:
        """
        Calculate short and tall reference ET.

        Args:
            observation: Validated daily weather observation

        Returns:
            Tuple of (et_short, et_tall) in mm/day
        """
        components = self.calculate_with_components(observation)
        return components.et_short, components.et_tall

    def calculate_with_components(self, observation: WeatherObservation) -> ReferenceETComponents:
        """
        Calculate reference ET with detailed intermediate components.

        Args:
            observation: Validated daily weather observation

        Returns:
            ReferenceETComponents with all intermediate values
        """
        # SECTION 1: Actual vapor pressure
        method = self.resolver.select_method(observation)
        ea = self.resolver.resolve(method)

        # SECTION 2: Psychrometric parameters
        pressure = RadiationModel.atmospheric_pressure(observation.z)
        gamma = RadiationModel.psychrometric_constant(pressure)

        # SECTION 3: Temperature and saturation vapor pressure
        tmean = RadiationModel.mean_temperature(observation.tmax, observation.tmin)
        delta = RadiationModel.slope_vapor_pressure_curve(tmean)
        es = RadiationModel.saturation_vapor_pressure(observation.tmax, observation.tmin)

        # SECTION 4: Extraterrestrial and clear-sky radiation
        day_number = observation.day_of_year
        ra, dr, declination, omega_s = RadiationModel.extraterrestrial_radiation_components(
            observation.latitude, day_number
        )
        rso = RadiationModel.clear_sky_radiation(ra, observation.z)

        # SECTION 5: Solar and net radiation
        rs, rs_estimated = RadiationModel.solar_radiation(
            observation.rs, observation.tmax, observation.tmin, ra, rso
        )
        if not rs_estimated and rs > rso:
            self.logger.warning(
                f"Measured Rs ({rs:.2f}) exceeds clear-sky radiation Rso ({rso:.2f}) "
                f"on day {day_number}, possible sensor fault"
            )

        fcd = RadiationModel.fraction_of_clear_day(rso, rs)
        rnl = RadiationModel.net_longwave_radiation(fcd, ea, observation.tmax, observation.tmin)
        rns = RadiationModel.net_shortwave_radiation(rs)
        rn = RadiationModel.net_radiation(rns, rnl)

        # SECTION 6: Wind speed at 2 m
        if observation.ws is None:
            raise MissingRequiredFieldError("ws", "wind speed adjustment")
        u2 = RadiationModel.adjust_wind_speed(observation.ws, observation.wz)

        # SECTION 7: Reference ET
        et_short = self._penman_monteith(
            delta, gamma, rn, tmean, u2, es, ea,
            constants.SHORT_REFERENCE_CN, constants.SHORT_REFERENCE_CD
        )
        et_tall = self._penman_monteith(
            delta, gamma, rn, tmean, u2, es, ea,
            constants.TALL_REFERENCE_CN, constants.TALL_REFERENCE_CD
        )

        self.logger.debug(
            f"Day {day_number}: P={pressure:.4f} γ={gamma:.6f} Δ={delta:.4f} "
            f"es={es:.4f} ea={ea:.4f} Ra={ra:.3f} Rso={rso:.3f} Rs={rs:.3f} "
            f"fcd={fcd:.4f} Rnl={rnl:.3f} Rn={rn:.3f} u2={u2:.3f} "
            f"ETos={et_short:.3f} ETrs={et_tall:.3f}"
        )

        return ReferenceETComponents(
            et_short=et_short,
            et_tall=et_tall,
            atmospheric_pressure=pressure,
            gamma=gamma,
            tmean=tmean,
            delta=delta,
            es=es,
            ea=ea,
            vapor_pressure_method=method.name,
            day_of_year=day_number,
            dr=dr,
            solar_declination=declination,
            sunset_hour_angle=omega_s,
            ra=ra,
            rso=rso,
            rs=rs,
            rs_estimated=rs_estimated,
            fcd=fcd,
            rnl=rnl,
            rns=rns,
            rn=rn,
            u2=u2
        )

    @staticmethod
    def _penman_monteith(
        delta: float,
        gamma: float,
        rn: float,
        tmean: float,
        u2: float,
        es: float,
        ea: float,
        cn: float,
        cd: float
    ) -> float:
        """
        Evaluate the standardized Penman-Monteith equation (Eq. 1).

        Args:
            delta: Slope of vapor pressure curve (kPa/°C)
            gamma: Psychrometric constant (kPa/°C)
            rn: Net radiation (MJ m⁻² day⁻¹)
            tmean: Mean temperature (°C)
            u2: Wind speed at 2 m (m/s)
            es: Saturation vapor pressure (kPa)
            ea: Actual vapor pressure (kPa)
            cn: Numerator constant for the reference surface
            cd: Denominator constant for the reference surface

        Returns:
            Reference ET (mm/day)
        """
        numerator = (
            constants.LATENT_HEAT_FACTOR * delta * (rn - constants.SOIL_HEAT_FLUX) +
            gamma * (cn / (tmean + constants.ET_KELVIN_OFFSET)) * u2 * (es - ea)
        )
        denominator = delta + gamma * (1 + cd * u2)
        return numerator / denominator


def calculate_ref_et(observation: WeatherObservation) -> Tuple[float, float]:
    """
    Calculate short and tall reference ET for one observation.

    Args:
        observation: Validated daily weather observation

    Returns:
        Tuple of (et_short, et_tall) in mm/day
    """
    return ReferenceETCalculator().calculate_ref_et(observation)
