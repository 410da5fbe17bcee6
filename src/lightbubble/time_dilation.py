"""Time dilation in special and general relativity.

Proper time experienced by a clock compared with the coordinate time of a
distant, stationary observer:

- special-relativistic dilation from the clock's speed
- gravitational dilation from a static mass
- both combined (delegates to :func:`lightbubble.spacetime.calculate_proper_time`)
- any metric, by contracting it with a one-second coordinate step
"""
from __future__ import annotations

import logging

import jax.numpy as jnp
from jaxtyping import Array, ArrayLike, Float

from . import spacetime
from .constants import speed_of_light
from .metrics.schwarzschild import schwarzschild_radius

logger = logging.getLogger(__name__)


def calculate_special_relativistic_time(
    velocity: Float[ArrayLike, ""], observer_time: Float[ArrayLike, ""]
) -> Float[Array, ""]:
    """Proper time of a clock moving at *velocity* (m/s) while *observer_time* passes.

    Equal to ``observer_time * sqrt(1 - v^2/c^2)``.
    """
    return observer_time / spacetime.lorentz_factor(velocity)


def calculate_gravitational_time(
    mass: Float[ArrayLike, ""],
    r: Float[ArrayLike, ""],
    observer_time: Float[ArrayLike, ""],
) -> Float[Array, ""]:
    """Proper time of a static clock at radius *r* from *mass*.

    Parameters
    ----------
    mass : float
        Mass of the gravitating body in kg.
    r : float
        Distance from the center of the body in meters.
    observer_time : float
        Time measured by an observer far from the body, in seconds.

    Returns
    -------
    Float[Array, ""]
        ``observer_time * sqrt(1 - r_s/r)``.
    """
    return observer_time * jnp.sqrt(1.0 - schwarzschild_radius(mass) / r)


def calculate_proper_time(
    velocity: Float[ArrayLike, ""],
    mass: Float[ArrayLike, ""],
    r: Float[ArrayLike, ""],
    observer_time: Float[ArrayLike, ""],
) -> Float[Array, ""]:
    """Combined velocity and gravitational dilation.

    Identical to :func:`lightbubble.spacetime.calculate_proper_time`.
    """
    return spacetime.calculate_proper_time(velocity, mass, r, observer_time)


def calculate_proper_time_with_metric(
    velocity_vector: Float[ArrayLike, "3"],
    metric_tensor: Float[ArrayLike, "4 4"],
    observer_time: Float[ArrayLike, ""],
) -> Float[Array, ""]:
    """Proper time from an arbitrary metric tensor.

    Builds the coordinate step for one second of coordinate time,
    ``dx = [1, vx/c, vy/c, vz/c]``, contracts it with *metric_tensor* and
    scales the resulting interval by *observer_time*.  Spatial coordinates
    are therefore taken to be in light-seconds.

    No Lorentz boost or four-velocity normalisation is applied.  In flat
    spacetime this reproduces ``sqrt(1 - v^2/c^2)`` exactly; in curved
    spacetime with a moving clock it is an approximation.

    Parameters
    ----------
    velocity_vector : array-like, shape (3,)
        ``[vx, vy, vz]`` in m/s.
    metric_tensor : array-like, shape (4, 4)
        Metric at the clock's position.
    observer_time : float
        Coordinate time in seconds.

    Raises
    ------
    ValueError
        If *velocity_vector* is not of shape ``(3,)`` or *metric_tensor*
        is not ``(4, 4)``.
    """
    v = jnp.asarray(velocity_vector, dtype=jnp.float64)
    if v.shape != (3,):
        raise ValueError(f"Expected velocity vector of shape (3,), got {v.shape}")

    dx = jnp.concatenate([jnp.ones(1), v / speed_of_light()])
    tau = spacetime.proper_time_interval(metric_tensor, dx)
    logger.debug("Unit-step proper time interval: %s", tau)
    return observer_time * tau
