"""
Radiation and meteorological parameter module.

Implements the daily radiation balance and the supporting meteorological
quantities of the ASCE-EWRI standardized reference ET equation:

- Atmospheric pressure and psychrometric constant
- Slope of the saturation vapor pressure curve
- Extraterrestrial, clear-sky, net shortwave and net longwave radiation
- Hargreaves-Samani solar radiation estimate
- Wind speed adjustment to 2 m

Reference:
    ASCE-EWRI (2005). The ASCE Standardized Reference Evapotranspiration
    Equation. Report of the Task Committee on Standardization of Reference
    Evapotranspiration.
"""

import math
from typing import Optional, Tuple

from ..core import constants
from ..exceptions import DomainMathError
from .vapor_pressure import saturation_vapor_pressure


class RadiationModel:
    """
    Pure functions for the radiation balance and meteorological parameters.

    All methods are static and hold no state.
    """

    # =========================================================================
    # SECTION 1: Psychrometric Parameters
    # =========================================================================

    @staticmethod
    def atmospheric_pressure(z: float) -> float:
        """
        Calculate mean atmospheric pressure at station elevation (Eq. 3).

        Args:
            z: Elevation above sea level (m)

        Returns:
            Atmospheric pressure (kPa)
        """
        ratio = (constants.STANDARD_TEMPERATURE_K - constants.LAPSE_RATE * z) / \
            constants.STANDARD_TEMPERATURE_K
        if ratio <= 0:
            raise DomainMathError(
                "Elevation too high for the atmospheric pressure equation",
                quantity="atmospheric_pressure",
                value=z
            )
        return constants.SEA_LEVEL_PRESSURE * ratio ** constants.PRESSURE_EXPONENT

    @staticmethod
    def psychrometric_constant(pressure: float) -> float:
        """
        Calculate psychrometric constant (Eq. 4).

        Args:
            pressure: Atmospheric pressure (kPa)

        Returns:
            Psychrometric constant (kPa/°C)
        """
        return constants.PSYCHROMETRIC_COEF * pressure

    @staticmethod
    def mean_temperature(t_max: float, t_min: float) -> float:
        """Mean daily air temperature (°C) (Eq. 2)."""
        return (t_max + t_min) / 2

    @staticmethod
    def slope_vapor_pressure_curve(t_mean: float) -> float:
        """
        Calculate the slope of the saturation vapor pressure curve (Eq. 5).

        Args:
            t_mean: Mean temperature (°C)

        Returns:
            Slope of vapor pressure curve (kPa/°C)
        """
        exponent = (constants.TETENS_B * t_mean) / (t_mean + constants.TETENS_C)
        return constants.SLOPE_COEF * math.exp(exponent) / (t_mean + constants.TETENS_C) ** 2

    @staticmethod
    def saturation_vapor_pressure(t_max: float, t_min: float) -> float:
        """
        Calculate mean daily saturation vapor pressure (Eq. 6).

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)

        Returns:
            Saturation vapor pressure (kPa)
        """
        return (saturation_vapor_pressure(t_max) + saturation_vapor_pressure(t_min)) / 2

    # =========================================================================
    # SECTION 2: Solar Geometry and Extraterrestrial Radiation
    # =========================================================================

    @staticmethod
    def inverse_relative_distance(day_number: int) -> float:
        """Inverse relative distance factor for the Earth-Sun (Eq. 23)."""
        return 1 + constants.EARTH_ORBIT_ECCENTRICITY * math.cos(
            2 * math.pi * day_number / constants.DAYS_PER_YEAR
        )

    @staticmethod
    def solar_declination(day_number: int) -> float:
        """
        Calculate solar declination for a given day of the year (Eq. 24).

        Args:
            day_number: Day of the year (1-365/366)

        Returns:
            Solar declination (radians)
        """
        return constants.SOLAR_DECLINATION_AMPLITUDE * math.sin(
            (2 * math.pi / constants.DAYS_PER_YEAR) * day_number
            - constants.SOLAR_DECLINATION_PHASE
        )

    @staticmethod
    def sunset_hour_angle(latitude: float, declination: float) -> float:
        """
        Calculate sunset hour angle (Eq. 27).

        Args:
            latitude: Latitude (radians)
            declination: Solar declination (radians)

        Returns:
            Sunset hour angle (radians)

        Raises:
            DomainMathError: When the sun does not rise or set (polar day or night)
        """
        x = -math.tan(latitude) * math.tan(declination)
        if not -1.0 <= x <= 1.0:
            raise DomainMathError(
                "Sunset hour angle undefined (polar day or night)",
                quantity="sunset_hour_angle",
                value=x
            )
        return math.acos(x)

    @staticmethod
    def extraterrestrial_radiation_components(
        latitude: float,
        day_number: int
    ) -> Tuple[float, float, float, float]:
        """
        Calculate extraterrestrial radiation and its solar geometry terms.

        Args:
            latitude: Latitude (radians)
            day_number: Day of the year (1-365/366)

        Returns:
            Tuple of (Ra, dr, declination, omega_s):
                - Ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)
                - dr: Inverse relative Earth-Sun distance
                - declination: Solar declination (radians)
                - omega_s: Sunset hour angle (radians)
        """
        dr = RadiationModel.inverse_relative_distance(day_number)
        declination = RadiationModel.solar_declination(day_number)
        omega_s = RadiationModel.sunset_hour_angle(latitude, declination)

        ra = (24 / math.pi) * constants.SOLAR_CONSTANT * dr * (
            omega_s * math.sin(latitude) * math.sin(declination) +
            math.cos(latitude) * math.cos(declination) * math.sin(omega_s)
        )

        return ra, dr, declination, omega_s

    @staticmethod
    def extraterrestrial_radiation(latitude: float, day_number: int) -> float:
        """
        Calculate extraterrestrial radiation for a 24-hour period (Eq. 21).

        Args:
            latitude: Latitude (radians)
            day_number: Day of the year (1-365/366)

        Returns:
            Extraterrestrial radiation (MJ m⁻² day⁻¹)
        """
        ra, _, _, _ = RadiationModel.extraterrestrial_radiation_components(latitude, day_number)
        return ra

    @staticmethod
    def clear_sky_radiation(ra: float, z: float) -> float:
        """
        Calculate clear-sky solar radiation (Eq. 19).

        Args:
            ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)
            z: Elevation (m)

        Returns:
            Clear-sky solar radiation (MJ m⁻² day⁻¹)
        """
        return (constants.CLEAR_SKY_COEF + constants.ALTITUDE_FACTOR * z) * ra

    # =========================================================================
    # SECTION 3: Solar Radiation
    # =========================================================================

    @staticmethod
    def hargreaves_samani_radiation(t_max: float, t_min: float, ra: float) -> float:
        """
        Estimate solar radiation from the daily temperature range.

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)

        Returns:
            Estimated solar radiation (MJ m⁻² day⁻¹)
        """
        t_range = t_max - t_min
        if t_range < 0:
            raise DomainMathError(
                "Negative temperature range in Hargreaves-Samani estimate",
                quantity="tmax - tmin",
                value=t_range
            )
        return constants.HARGREAVES_KRS * ra * math.sqrt(t_range)

    @staticmethod
    def solar_radiation(
        measured_rs: Optional[float],
        t_max: float,
        t_min: float,
        ra: float,
        rso: float
    ) -> Tuple[float, bool]:
        """
        Choose the solar radiation used in the radiation balance.

        A measured value is used as-is. Otherwise Rs is estimated with
        Hargreaves-Samani and limited to the clear-sky radiation.

        Args:
            measured_rs: Measured solar radiation (MJ m⁻² day⁻¹), or None
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)
            rso: Clear-sky solar radiation (MJ m⁻² day⁻¹)

        Returns:
            Tuple of (Rs, estimated)
        """
        if measured_rs is not None:
            return measured_rs, False

        rs = RadiationModel.hargreaves_samani_radiation(t_max, t_min, ra)
        return min(rs, rso), True

    # =========================================================================
    # SECTION 4: Net Radiation
    # =========================================================================

    @staticmethod
    def fraction_of_clear_day(rso: float, rs: float) -> float:
        """
        Calculate the cloudiness function fcd (Eq. 18).

        Rs/Rso is limited to [0.3, 1.0], so fcd falls in [0.055, 1.0].

        Args:
            rso: Clear-sky solar radiation (MJ m⁻² day⁻¹)
            rs: Solar radiation (MJ m⁻² day⁻¹)

        Returns:
            Cloudiness function (dimensionless)
        """
        if rso <= 0:
            raise DomainMathError(
                "Clear-sky radiation must be positive to compute Rs/Rso",
                quantity="rso",
                value=rso
            )
        relative = min(
            max(rs / rso, constants.RELATIVE_RADIATION_MIN),
            constants.RELATIVE_RADIATION_MAX
        )
        return constants.FCD_SLOPE * relative - constants.FCD_OFFSET

    @staticmethod
    def net_longwave_radiation(fcd: float, ea: float, t_max: float, t_min: float) -> float:
        """
        Calculate net outgoing longwave radiation (Eq. 17).

        Args:
            fcd: Cloudiness function (dimensionless)
            ea: Actual vapor pressure (kPa)
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)

        Returns:
            Net longwave radiation (MJ m⁻² day⁻¹)
        """
        if ea < 0:
            raise DomainMathError(
                "Negative actual vapor pressure in net longwave radiation",
                quantity="ea",
                value=ea
            )
        tmax_k4 = (t_max + constants.KELVIN_OFFSET) ** 4
        tmin_k4 = (t_min + constants.KELVIN_OFFSET) ** 4

        return (
            constants.STEFAN_BOLTZMANN * fcd *
            (constants.NLW_EMISSIVITY_A - constants.NLW_EMISSIVITY_B * math.sqrt(ea)) *
            (tmax_k4 + tmin_k4) / 2
        )

    @staticmethod
    def net_shortwave_radiation(rs: float) -> float:
        """Net shortwave radiation for the reference albedo of 0.23 (Eq. 16)."""
        return (1 - constants.REFERENCE_ALBEDO) * rs

    @staticmethod
    def net_radiation(rns: float, rnl: float) -> float:
        """Net radiation Rn = Rns - Rnl (Eq. 15)."""
        return rns - rnl

    # =========================================================================
    # SECTION 5: Wind Speed Adjustment
    # =========================================================================

    @staticmethod
    def adjust_wind_speed(ws: float, wz: float) -> float:
        """
        Adjust wind speed measured at height wz to 2 m (Eq. 33).

        Args:
            ws: Wind speed at height wz (m/s)
            wz: Measurement height (m)

        Returns:
            Wind speed at 2 m (m/s)
        """
        if wz == constants.REFERENCE_WIND_HEIGHT:
            return ws

        log_arg = constants.WIND_PROFILE_SCALE * wz - constants.WIND_PROFILE_OFFSET
        if log_arg <= 1.0:
            raise DomainMathError(
                f"Wind measurement height {wz} m is too low for the log wind profile",
                quantity="wz",
                value=wz
            )
        return ws * constants.WIND_PROFILE_NUMERATOR / math.log(log_arg)
