"""
Tests for the standardized Penman-Monteith reference ET calculator.

Uses the Greeley, Colorado (1 July 2000) example day from conftest.
"""

from datetime import date

import pytest  # type: ignore
from src.reference_et.algorithms import (
    RadiationModel,
    ReferenceETCalculator,
    calculate_ref_et,
    saturation_vapor_pressure,
)
from src.reference_et.exceptions import DomainMathError, InvalidInputError, MissingRequiredFieldError
from src.reference_et.models import WeatherObservation


@pytest.fixture
def calculator():
    """Create calculator instance."""
    return ReferenceETCalculator()


class TestReferenceET:
    """Test cases for the final ET values."""

    def test_greeley_reference_day(self, calculator, greeley_observation):
        et_short, et_tall = calculator.calculate_ref_et(greeley_observation)

        assert et_short == pytest.approx(5.690, abs=0.01), \
            f"Short reference ET should be ~5.69 mm/day, got {et_short:.3f}"
        assert et_tall == pytest.approx(7.321, abs=0.01), \
            f"Tall reference ET should be ~7.32 mm/day, got {et_tall:.3f}"

    def test_module_level_function(self, greeley_observation):
        et_short, et_tall = calculate_ref_et(greeley_observation)
        assert et_short == pytest.approx(5.690, abs=0.01)
        assert et_tall == pytest.approx(7.321, abs=0.01)

    def test_tall_exceeds_short(self, calculator, greeley_observation):
        """Alfalfa transpires more than clipped grass on a dry, windy summer day."""
        et_short, et_tall = calculator.calculate_ref_et(greeley_observation)
        assert et_tall > et_short > 0

    def test_estimated_solar_radiation(self, calculator, greeley_values):
        greeley_values["rs"] = None
        components = calculator.calculate_with_components(WeatherObservation(**greeley_values))

        assert components.rs_estimated is True
        assert components.rs <= components.rso
        assert components.rs == pytest.approx(30.882, abs=0.01)
        assert components.et_short == pytest.approx(6.760, abs=0.01)
        assert components.et_tall == pytest.approx(8.374, abs=0.01)

    def test_repeatable(self, calculator, greeley_observation):
        """Identical inputs give identical results."""
        assert calculator.calculate_ref_et(greeley_observation) == \
            calculator.calculate_ref_et(greeley_observation)

    def test_equal_temperatures(self, calculator, greeley_values):
        """tmax == tmin is valid and es collapses to eo(tmax)."""
        greeley_values.update(tmax=20.0, tmin=20.0, rs=None)
        components = calculator.calculate_with_components(WeatherObservation(**greeley_values))

        assert components.es == saturation_vapor_pressure(20.0)
        assert components.rs == 0.0
        assert components.fcd == pytest.approx(0.055)

    def test_reference_height_wind(self, calculator, greeley_values):
        greeley_values.update(ws=2.5, wz=2.0)
        components = calculator.calculate_with_components(WeatherObservation(**greeley_values))
        assert components.u2 == 2.5

    def test_zero_wind_speed_rejected(self, greeley_values):
        """A supplied wind speed must be positive."""
        greeley_values.update(ws=0.0)
        with pytest.raises(InvalidInputError) as exc_info:
            WeatherObservation(**greeley_values)
        assert any("wind speed" in error for error in exc_info.value.errors)

    def test_light_wind_approaches_radiation_term(self, calculator, greeley_values):
        """As wind drops the aerodynamic term vanishes for both surfaces."""
        greeley_values.update(ws=1e-6)
        components = calculator.calculate_with_components(WeatherObservation(**greeley_values))

        expected = 0.408 * components.delta * components.rn / (components.delta + components.gamma)
        assert components.et_short == pytest.approx(expected, abs=1e-3)
        assert components.et_tall == pytest.approx(expected, abs=1e-3)


class TestComponents:
    """Test cases for the intermediate quantities."""

    def test_greeley_components(self, calculator, greeley_observation):
        components = calculator.calculate_with_components(greeley_observation)

        assert components.atmospheric_pressure == pytest.approx(85.1666, abs=0.001)
        assert components.gamma == pytest.approx(0.056635, abs=0.001)
        assert components.tmean == pytest.approx(21.65)
        assert components.delta == pytest.approx(0.1585, abs=0.001)
        assert components.es == pytest.approx(3.0837, abs=0.001)
        assert components.ea == 1.27
        assert components.vapor_pressure_method == "Direct"
        assert components.day_of_year == 183
        assert components.ra == pytest.approx(41.626, abs=0.001)
        assert components.rso == pytest.approx(32.437, abs=0.001)
        assert components.rs == 22.4
        assert components.rs_estimated is False
        assert components.fcd == pytest.approx(0.5823, abs=0.001)
        assert components.rnl == pytest.approx(3.9595, abs=0.001)
        assert components.rns == pytest.approx(17.248, abs=0.001)
        assert components.rn == pytest.approx(13.2885, abs=0.001)
        assert components.u2 == pytest.approx(1.786, abs=0.001)

    def test_components_are_consistent(self, calculator, greeley_observation):
        components = calculator.calculate_with_components(greeley_observation)

        assert components.rn == pytest.approx(components.rns - components.rnl)
        assert components.vpd == pytest.approx(components.es - components.ea)
        assert components.ra == pytest.approx(
            RadiationModel.extraterrestrial_radiation(greeley_observation.latitude, 183)
        )

    def test_to_dict(self, calculator, greeley_observation):
        data = calculator.calculate_with_components(greeley_observation).to_dict()
        assert data["vapor_pressure_method"] == "Direct"
        assert set(["et_short", "et_tall", "ra", "rn", "u2"]).issubset(data)

    def test_fallback_vapor_pressure(self, calculator, greeley_values):
        greeley_values["ea"] = None
        components = calculator.calculate_with_components(WeatherObservation(**greeley_values))
        assert components.vapor_pressure_method == "DailyMinAirTemperature"
        assert components.ea == pytest.approx(saturation_vapor_pressure(10.9 - 3.0))


class TestErrors:
    """Test cases for error reporting."""

    def test_missing_wind_speed(self, calculator, greeley_values):
        greeley_values["ws"] = None
        observation = WeatherObservation(**greeley_values)

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            calculator.calculate_ref_et(observation)
        assert exc_info.value.field_name == "ws"

    def test_wind_height_too_low(self, calculator, greeley_values):
        greeley_values["wz"] = 0.05
        observation = WeatherObservation(**greeley_values)

        with pytest.raises(DomainMathError):
            calculator.calculate_ref_et(observation)

    def test_polar_night(self, calculator, greeley_values):
        greeley_values.update(latitude=1.45, date=date(2000, 12, 21))
        observation = WeatherObservation(**greeley_values)

        with pytest.raises(DomainMathError):
            calculator.calculate_ref_et(observation)

    def test_measured_radiation_above_clear_sky_warns(self, calculator, greeley_values, caplog):
        """A measured Rs above Rso is passed through with a warning."""
        greeley_values["rs"] = 40.0
        observation = WeatherObservation(**greeley_values)

        with caplog.at_level("WARNING"):
            components = calculator.calculate_with_components(observation)

        assert components.rs == 40.0
        assert components.fcd == pytest.approx(1.0)
        assert "exceeds clear-sky radiation" in caplog.text
