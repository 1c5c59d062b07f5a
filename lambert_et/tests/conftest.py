"""
Pytest configuration and fixtures for lambert_et tests.

Provides common fixtures for testing.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def scenario():
    """Single-point observations for a well-watered grass surface."""
    return {
        "Ta": 293.15,   # K
        "qa": 0.008,    # -
        "gs": 0.005,    # m/s
        "ga": 0.02,     # m/s
        "Rn": 200.0,    # W/m2
        "G": 20.0,      # W/m2
        "P": 101325.0,  # Pa
        "gg": 0.0,      # m/s
        "gr": 0.0,      # m/s
    }


@pytest.fixture
def timeseries_inputs():
    """Half-hourly style batch of observations (6 steps)."""
    return {
        "Ta": np.array([285.0, 288.5, 292.0, 295.5, 298.0, 296.0]),
        "qa": np.array([0.006, 0.007, 0.008, 0.009, 0.010, 0.0095]),
        "gs": np.array([0.002, 0.004, 0.006, 0.008, 0.007, 0.005]),
        "ga": np.array([0.010, 0.015, 0.020, 0.030, 0.025, 0.018]),
        "Rn": np.array([50.0, 150.0, 300.0, 450.0, 500.0, 350.0]),
        "G": np.array([5.0, 15.0, 30.0, 45.0, 50.0, 35.0]),
        "P": np.array([101000.0, 101100.0, 101200.0, 101150.0, 101050.0, 100950.0]),
        "gg": np.zeros(6),
        "gr": np.zeros(6),
    }


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    from lambert_et.utils.logger import Logger
    Logger.configure_for_testing()
    yield
    Logger.configure_for_testing()
