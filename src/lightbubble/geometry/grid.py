"""Batched evaluation: lift a pointwise metric to many coordinate points.

Uses the flatten-vmap pattern: coordinate points are stacked into a batch of
shape ``(N, 4)`` and the pointwise metric is mapped over the leading axis.
Typical use is sampling a metric along a radial line that crosses a
horizon or throat, where the singular samples come back as ``inf``/``nan``
entries instead of aborting the sweep.

For long sweeps, use the ``batch_size`` parameter to process the batch in
chunks via ``jax.lax.map``, trading peak parallelism for bounded memory.
"""
from __future__ import annotations

import logging
from typing import Callable

import jax
import jax.numpy as jnp
from jax import lax
from jaxtyping import Array, ArrayLike, Float

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Coordinate batch construction
# ---------------------------------------------------------------------------


def build_radial_batch(
    r_values: Float[ArrayLike, "N"],
    theta: float,
    phi: float = 0.0,
    t: float = 0.0,
) -> Float[Array, "N 4"]:
    """Build a batch of ``(t, r, theta, phi)`` points along a radial line.

    Parameters
    ----------
    r_values : array-like, shape (N,)
        Radial coordinates to sample.  For FLRW pass comoving ``chi``.
    theta : float
        Polar angle shared by every point.
    phi : float, optional
        Azimuthal angle shared by every point (default 0.0).
    t : float, optional
        Coordinate time shared by every point (default 0.0).

    Returns
    -------
    Float[Array, "N 4"]
        One coordinate 4-vector per row.
    """
    r = jnp.asarray(r_values, dtype=jnp.float64)
    if r.ndim != 1:
        raise ValueError(f"Expected 1-D array of radii, got shape {r.shape}")
    T = jnp.full_like(r, t)
    TH = jnp.full_like(r, theta)
    PH = jnp.full_like(r, phi)
    return jnp.stack([T, r, TH, PH], axis=-1)


# ---------------------------------------------------------------------------
# Batch evaluation
# ---------------------------------------------------------------------------


def evaluate_metric_batch(
    metric_fn: Callable[[Float[Array, "4"]], Float[Array, "4 4"]],
    coords_batch: Float[ArrayLike, "N 4"],
    *,
    batch_size: int | None = None,
) -> Float[Array, "N 4 4"]:
    """Evaluate a pointwise metric at every row of *coords_batch*.

    Parameters
    ----------
    metric_fn : callable
        A MetricSpecification or any callable mapping coords ``(4,)`` to
        metric tensor ``(4, 4)``.
    coords_batch : array-like, shape (N, 4)
        Coordinate points, one per row.
    batch_size : int or None, optional
        If None (default), use full ``jax.vmap`` over all points.
        If int, use ``jax.lax.map`` with ``batch_size`` for memory-safe
        chunked processing.

    Returns
    -------
    Float[Array, "N 4 4"]
        Metric tensor at each point.
    """
    coords = jnp.asarray(coords_batch, dtype=jnp.float64)
    if coords.ndim != 2 or coords.shape[-1] != 4:
        raise ValueError(
            f"Expected coordinate batch of shape (N, 4), got {coords.shape}"
        )
    logger.debug(
        "Evaluating metric at %d points (batch_size=%s)",
        coords.shape[0],
        batch_size,
    )

    if batch_size is not None:
        return lax.map(metric_fn, coords, batch_size=batch_size)
    return jax.vmap(metric_fn)(coords)
