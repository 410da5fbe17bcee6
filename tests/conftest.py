"""Shared test fixtures for the lightbubble test suite.

Float64 enforcement is verified at import time.  Every test that touches
JAX arrays should confirm dtype == float64 in its assertions.
"""

import math

import jax.numpy as jnp
import pytest

import lightbubble  # noqa: F401  (enables float64)
from lightbubble.constants import speed_of_light
from lightbubble.metrics import (
    FLRWMetric,
    KerrMetric,
    MinkowskiMetric,
    MorrisThorneMetric,
    SchwarzschildMetric,
)

# ---------------------------------------------------------------------------
# Float64 enforcement check fails LOUD if x64 is not enabled
# ---------------------------------------------------------------------------
_probe = jnp.array(1.0)
assert _probe.dtype == jnp.float64, (
    f"JAX float64 not enabled!  Got dtype={_probe.dtype}.  "
    "Ensure jax.config.update('jax_enable_x64', True) runs before any JAX import."
)

EARTH_MASS = 5.972e24  # kg
EARTH_RADIUS = 6.371e6  # m
SOLAR_MASS = 1.989e30  # kg


# ---------------------------------------------------------------------------
# Physical parameter fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def c() -> float:
    return speed_of_light()


@pytest.fixture
def earth() -> dict:
    """Earth mass and surface radius, equatorial plane."""
    return {"mass": EARTH_MASS, "r": EARTH_RADIUS, "theta": math.pi / 2, "phi": 0.0}


@pytest.fixture
def kerr_params() -> dict:
    """Solar-mass rotating hole sampled at 3 km in the equatorial plane."""
    return {
        "mass": SOLAR_MASS,
        "angular_momentum": 1.0e40,
        "r": 3.0e3,
        "theta": math.pi / 2,
    }


# ---------------------------------------------------------------------------
# Coordinate fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_coords() -> jnp.ndarray:
    """Generic off-equator point (t, r, theta, phi) well outside every horizon."""
    return jnp.array([0.0, 7.0e6, 1.1, 0.4])


# ---------------------------------------------------------------------------
# Metric fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def all_metrics() -> list:
    """All five metrics at reference parameters for parameterized tests."""
    return [
        MinkowskiMetric(),
        SchwarzschildMetric(mass=EARTH_MASS),
        KerrMetric(mass=SOLAR_MASS, angular_momentum=1.0e40),
        MorrisThorneMetric(throat_radius=1.0e3),
        FLRWMetric(scale_factor=1.0, curvature=0.0),
    ]
