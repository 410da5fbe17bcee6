"""Metric tensors at a point and proper time along an interval.

Functional surface over :mod:`lightbubble.metrics`: each builder takes the
physical parameters and the position as plain scalars and returns the
``(4, 4)`` float64 metric there.  Inputs are promoted to float64 JAX values
before any arithmetic, so evaluating at a horizon or throat yields
``inf``/``nan`` entries rather than raising.

Index conventions:
    - Minkowski: (t, x, y, z)
    - Schwarzschild, Kerr, Morris-Thorne: (t, r, theta, phi)
    - FLRW: (t, chi, theta, phi)
"""
from __future__ import annotations

import jax.numpy as jnp
from jaxtyping import Array, ArrayLike, Float

from .constants import speed_of_light
from .metrics.flrw import FLRWMetric
from .metrics.kerr import KerrMetric
from .metrics.minkowski import MinkowskiMetric
from .metrics.morris_thorne import MorrisThorneMetric
from .metrics.schwarzschild import SchwarzschildMetric, schwarzschild_radius

__all__ = [
    "calculate_proper_time",
    "flrw_metric",
    "interval_squared",
    "kerr_metric",
    "lorentz_factor",
    "minkowski_metric",
    "morris_thorne_metric",
    "proper_time_interval",
    "schwarzschild_metric",
    "schwarzschild_radius",
]


def _point(
    r: Float[ArrayLike, ""],
    theta: Float[ArrayLike, ""],
    phi: Float[ArrayLike, ""] = 0.0,
) -> Float[Array, "4"]:
    """Coordinate 4-vector ``(0, r, theta, phi)``; t is irrelevant to every metric here."""
    return jnp.asarray([0.0, r, theta, phi], dtype=jnp.float64)


# ---------------------------------------------------------------------------
# Metric builders
# ---------------------------------------------------------------------------


def minkowski_metric() -> Float[Array, "4 4"]:
    """Flat spacetime metric ``diag(-1, 1, 1, 1)``."""
    return MinkowskiMetric()(jnp.zeros(4))


def schwarzschild_metric(
    mass: Float[ArrayLike, ""],
    r: Float[ArrayLike, ""],
    theta: Float[ArrayLike, ""],
    phi: Float[ArrayLike, ""],
) -> Float[Array, "4 4"]:
    """Schwarzschild metric around a non-rotating mass.

    Parameters
    ----------
    mass : float
        Mass of the central object in kilograms.
    r : float
        Radial distance from the center in meters.
    theta : float
        Polar angle in radians.
    phi : float
        Azimuthal angle in radians.  Accepted for a complete position; the
        metric does not depend on it.

    Returns
    -------
    Float[Array, "4 4"]
        Diagonal metric in ``(t, r, theta, phi)``.
    """
    return SchwarzschildMetric(mass=mass)(_point(r, theta, phi))


def kerr_metric(
    mass: Float[ArrayLike, ""],
    angular_momentum: Float[ArrayLike, ""],
    r: Float[ArrayLike, ""],
    theta: Float[ArrayLike, ""],
) -> Float[Array, "4 4"]:
    """Kerr metric around a rotating black hole.

    Parameters
    ----------
    mass : float
        Mass of the black hole in kilograms.
    angular_momentum : float
        Angular momentum in kg m^2 / s.
    r : float
        Boyer-Lindquist radius in meters.
    theta : float
        Polar angle in radians.

    Returns
    -------
    Float[Array, "4 4"]
        Metric in ``(t, r, theta, phi)`` with symmetric (t, phi) cross terms.
    """
    metric = KerrMetric(mass=mass, angular_momentum=angular_momentum)
    return metric(_point(r, theta))


def morris_thorne_metric(
    throat_radius: Float[ArrayLike, ""],
    r: Float[ArrayLike, ""],
    theta: Float[ArrayLike, ""],
) -> Float[Array, "4 4"]:
    """Morris-Thorne traversable wormhole metric.

    Parameters
    ----------
    throat_radius : float
        Radius of the wormhole throat in meters.
    r : float
        Radial coordinate in meters.
    theta : float
        Polar angle in radians.
    """
    return MorrisThorneMetric(throat_radius=throat_radius)(_point(r, theta))


def flrw_metric(
    scale_factor: Float[ArrayLike, ""],
    curvature: Float[ArrayLike, ""],
    chi: Float[ArrayLike, ""],
    theta: Float[ArrayLike, ""],
) -> Float[Array, "4 4"]:
    """FLRW metric for a homogeneous, isotropic universe.

    Parameters
    ----------
    scale_factor : float
        Dimensionless scale factor.
    curvature : float
        Spatial curvature index, -1, 0 or 1 for an open, flat or closed
        universe.  Not validated.
    chi : float
        Dimensionless comoving radial coordinate.
    theta : float
        Polar angle in radians.
    """
    metric = FLRWMetric(scale_factor=scale_factor, curvature=curvature)
    return metric(_point(chi, theta))


# ---------------------------------------------------------------------------
# Contraction
# ---------------------------------------------------------------------------


def interval_squared(
    metric: Float[ArrayLike, "4 4"],
    dx: Float[ArrayLike, "4"],
) -> Float[Array, ""]:
    """Signed line element ds^2 = g_{mu nu} dx^mu dx^nu.

    Sums over all 16 ordered index pairs, so symmetric off-diagonal entries
    (Kerr's g_tphi and g_phit) each contribute once.

    Raises
    ------
    ValueError
        If *metric* is not ``(4, 4)`` or *dx* is not ``(4,)``.
    """
    g = jnp.asarray(metric, dtype=jnp.float64)
    dx = jnp.asarray(dx, dtype=jnp.float64)
    if g.shape != (4, 4):
        raise ValueError(f"Expected (4, 4) metric tensor, got {g.shape}")
    if dx.shape != (4,):
        raise ValueError(f"Expected coordinate differential of shape (4,), got {dx.shape}")
    return jnp.einsum("ab,a,b", g, dx, dx)


def proper_time_interval(
    metric: Float[ArrayLike, "4 4"],
    dx: Float[ArrayLike, "4"],
) -> Float[Array, ""]:
    """Magnitude of the interval, sqrt(|ds^2|).

    The absolute value makes timelike (ds^2 < 0) and spacelike (ds^2 > 0)
    intervals both return a non-negative number; use
    :func:`interval_squared` when the sign matters.

    Parameters
    ----------
    metric : array-like, shape (4, 4)
        Metric tensor at the point.
    dx : array-like, shape (4,)
        Coordinate differential ``[dt, dx1, dx2, dx3]`` in the metric's basis.
    """
    return jnp.sqrt(jnp.abs(interval_squared(metric, dx)))


# ---------------------------------------------------------------------------
# Closed-form proper time
# ---------------------------------------------------------------------------


def lorentz_factor(velocity: Float[ArrayLike, "..."]) -> Float[Array, "..."]:
    """Lorentz factor gamma = 1 / sqrt(1 - v^2/c^2).  nan for |v| > c."""
    c = speed_of_light()
    v = jnp.asarray(velocity, dtype=jnp.float64)
    return 1.0 / jnp.sqrt(1.0 - v * v / (c * c))


def calculate_proper_time(
    velocity: Float[ArrayLike, ""],
    mass: Float[ArrayLike, ""],
    r: Float[ArrayLike, ""],
    coordinate_time: Float[ArrayLike, ""],
) -> Float[Array, ""]:
    """Proper time of a clock moving through a static gravitational field.

    Combines the special-relativistic factor ``1/gamma_v`` with the
    gravitational factor ``sqrt(1 - r_s/r)``:

        tau = coordinate_time / (gamma_v / gamma_g)

    Parameters
    ----------
    velocity : float
        Speed of the clock in m/s, ``|velocity| < c``.
    mass : float
        Mass of the gravitating body in kg.
    r : float
        Distance from the body's center in meters, ``r > r_s``.
    coordinate_time : float
        Time elapsed for a distant observer in seconds.

    Returns
    -------
    Float[Array, ""]
        Proper time in seconds; nan outside the physical domain.
    """
    gamma_v = lorentz_factor(velocity)
    gamma_g = jnp.sqrt(1.0 - schwarzschild_radius(mass) / r)
    return coordinate_time / (gamma_v / gamma_g)
