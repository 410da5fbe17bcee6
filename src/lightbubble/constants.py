"""Physical constants (CODATA 2018, SI units).

Exposed as functions rather than module attributes so every call returns a
fresh Python float and derived values are recomputed on demand.
"""

from __future__ import annotations

import math


def speed_of_light() -> float:
    """Speed of light in vacuum, m/s (exact by definition)."""
    return 299792458.0


def gravitational_constant() -> float:
    """Newtonian gravitational constant, m^3 / (kg s^2)."""
    return 6.67430e-11


def planck_constant() -> float:
    """Planck constant h, J s (exact by definition)."""
    return 6.62607015e-34


def reduced_planck_constant() -> float:
    """Reduced Planck constant hbar = h / (2 pi), J s."""
    return planck_constant() / (2 * math.pi)
