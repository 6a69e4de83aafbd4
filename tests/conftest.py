"""
Pytest configuration and shared fixtures for all tests.
"""

import math
import sys
from datetime import date
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.reference_et.models import WeatherObservation  # noqa: E402


# Greeley, Colorado, 1 July 2000 (ASCE-EWRI standardization example)
GREELEY = {
    "tmax": 32.4,
    "tmin": 10.9,
    "ea": 1.27,
    "rs": 22.4,
    "ws": 1.94,
    "wz": 3.0,
    "z": 1462.4,
    "latitude": math.radians(40.41),
    "date": date(2000, 7, 1),
}


@pytest.fixture
def greeley_values():
    """Raw field values of the Greeley reference day in canonical units."""
    return dict(GREELEY)


@pytest.fixture
def greeley_observation(greeley_values):
    """Greeley reference day as a validated observation."""
    return WeatherObservation(**greeley_values)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test covering several components"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
