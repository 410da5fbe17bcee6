"""Morris-Thorne traversable wormhole with zero redshift function.

Line element:
    ds^2 = -dt^2 + (1 - b/r)^{-1} dr^2 + r^2 (dtheta^2 + sin^2(theta) dphi^2)

with constant shape function b(r) = b_0 (the throat radius).  Clocks are
not dilated anywhere (g_tt = -1); only the radial proper distance is
stretched, diverging at the throat r = b_0.
"""

from __future__ import annotations

import jax.numpy as jnp
import sympy as sp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from ..geometry.metric import MetricSpecification, SymbolicMetric


class MorrisThorneMetric(MetricSpecification):
    """Morris-Thorne wormhole in ``(t, r, theta, phi)`` coordinates.

    Parameters
    ----------
    throat_radius : float
        Throat radius b_0 in meters.
    """

    throat_radius: float

    @jaxtyped(typechecker=beartype)
    def __call__(self, coords: Float[Array, "4"]) -> Float[Array, "4 4"]:
        _, r, theta, _ = coords
        sin2 = jnp.sin(theta) ** 2

        g = jnp.zeros((4, 4))
        g = g.at[0, 0].set(-1.0)
        g = g.at[1, 1].set(1.0 / (1.0 - self.throat_radius / r))
        g = g.at[2, 2].set(r * r)
        g = g.at[3, 3].set(r * r * sin2)
        return g

    def symbolic(self) -> SymbolicMetric:
        """Return SymPy symbolic form for inspection and cross-validation."""
        return morris_thorne_symbolic()

    def name(self) -> str:
        return "Morris-Thorne"


def morris_thorne_symbolic(b: sp.Symbol | None = None) -> SymbolicMetric:
    """Module-level convenience: symbolic Morris-Thorne metric.

    Parameters
    ----------
    b : sp.Symbol or None
        Throat radius symbol.  If *None*, creates ``Symbol('b', positive=True)``.
    """
    t, r, theta, phi = sp.symbols("t r theta phi")
    if b is None:
        b = sp.Symbol("b", positive=True)

    g = sp.diag(-1, 1 / (1 - b / r), r**2, r**2 * sp.sin(theta) ** 2)
    return SymbolicMetric([t, r, theta, phi], g)


PROPERTIES = {
    "coordinates": ("t", "r", "theta", "phi"),
    "vacuum": False,
    "rotating": False,
    "singular_surfaces": ("r = b",),
}
