"""Friedmann-Lemaitre-Robertson-Walker (FLRW) cosmology at a fixed epoch.

Line element in comoving hyperspherical coordinates:
    ds^2 = -dt^2 + a^2 [ dchi^2 / (1 - k chi^2)
                         + chi^2 (dtheta^2 + sin^2(theta) dphi^2) ]

The scale factor a is taken as a constant snapshot, so the metric does
not depend on t.  k is -1, 0 or 1 for an open, flat or closed universe.
Other values are accepted and evaluated mechanically.
"""

from __future__ import annotations

import jax.numpy as jnp
import sympy as sp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from ..geometry.metric import MetricSpecification, SymbolicMetric


class FLRWMetric(MetricSpecification):
    """FLRW metric in ``(t, chi, theta, phi)`` coordinates.

    Parameters
    ----------
    scale_factor : float
        Dimensionless scale factor a.
    curvature : float
        Spatial curvature index k.
    """

    scale_factor: float = 1.0
    curvature: float = 0.0

    @jaxtyped(typechecker=beartype)
    def __call__(self, coords: Float[Array, "4"]) -> Float[Array, "4 4"]:
        _, chi, theta, _ = coords
        a2 = jnp.asarray(self.scale_factor, dtype=jnp.float64) ** 2
        sin2 = jnp.sin(theta) ** 2

        g = jnp.zeros((4, 4))
        g = g.at[0, 0].set(-1.0)
        g = g.at[1, 1].set(a2 / (1.0 - self.curvature * chi * chi))
        g = g.at[2, 2].set(a2 * chi * chi)
        g = g.at[3, 3].set(a2 * chi * chi * sin2)
        return g

    def symbolic(self) -> SymbolicMetric:
        """Return SymPy symbolic form for inspection and cross-validation."""
        return flrw_symbolic()

    def name(self) -> str:
        return "FLRW"


def flrw_symbolic(
    a: sp.Symbol | None = None, k: sp.Symbol | None = None
) -> SymbolicMetric:
    """Module-level convenience: symbolic FLRW metric.

    Parameters
    ----------
    a : sp.Symbol or None
        Scale factor symbol (positive).
    k : sp.Symbol or None
        Curvature index symbol (real, unrestricted).
    """
    t, chi, theta, phi = sp.symbols("t chi theta phi")
    if a is None:
        a = sp.Symbol("a", positive=True)
    if k is None:
        k = sp.Symbol("k", real=True)

    g = sp.diag(
        -1,
        a**2 / (1 - k * chi**2),
        a**2 * chi**2,
        a**2 * chi**2 * sp.sin(theta) ** 2,
    )
    return SymbolicMetric([t, chi, theta, phi], g)


PROPERTIES = {
    "coordinates": ("t", "chi", "theta", "phi"),
    "vacuum": False,
    "rotating": False,
    "singular_surfaces": ("k chi^2 = 1",),
}
