"""Schwarzschild spacetime in Schwarzschild (spherical) coordinates.

Line element:
    ds^2 = -(1 - r_s/r) dt^2 + (1 - r_s/r)^{-1} dr^2
           + r^2 (dtheta^2 + sin^2(theta) dphi^2)

with Schwarzschild radius r_s = 2 G M / c^2.

The metric is static and spherically symmetric, so it does not depend on
t or phi.  It is singular at the horizon r = r_s (coordinate singularity)
and at r = 0 (curvature singularity); both surface as inf/nan entries.
"""

from __future__ import annotations

import jax.numpy as jnp
import sympy as sp
from beartype import beartype
from jaxtyping import Array, ArrayLike, Float, jaxtyped

from ..constants import gravitational_constant, speed_of_light
from ..geometry.metric import MetricSpecification, SymbolicMetric


def schwarzschild_radius(mass: Float[ArrayLike, "..."]) -> Float[Array, "..."]:
    """Schwarzschild radius r_s = 2 G M / c^2 in meters."""
    c = speed_of_light()
    mass = jnp.asarray(mass, dtype=jnp.float64)
    return 2.0 * gravitational_constant() * mass / (c * c)


class SchwarzschildMetric(MetricSpecification):
    """Schwarzschild metric in ``(t, r, theta, phi)`` coordinates.

    Full g_ab interface with a purely diagonal tensor.

    Parameters
    ----------
    mass : float
        Mass of the central body in kilograms.  Dynamic field (no
        recompilation on change).
    """

    mass: float

    @jaxtyped(typechecker=beartype)
    def __call__(self, coords: Float[Array, "4"]) -> Float[Array, "4 4"]:
        _, r, theta, _ = coords
        f = 1.0 - schwarzschild_radius(self.mass) / r
        sin2 = jnp.sin(theta) ** 2

        g = jnp.zeros((4, 4))
        g = g.at[0, 0].set(-f)
        g = g.at[1, 1].set(1.0 / f)
        g = g.at[2, 2].set(r * r)
        g = g.at[3, 3].set(r * r * sin2)
        return g

    def symbolic(self) -> SymbolicMetric:
        """Return SymPy symbolic form for inspection and cross-validation."""
        return schwarzschild_symbolic()

    def name(self) -> str:
        return "Schwarzschild"


def schwarzschild_symbolic(M: sp.Symbol | None = None) -> SymbolicMetric:
    """Module-level convenience: symbolic Schwarzschild metric.

    Parameters
    ----------
    M : sp.Symbol or None
        Mass symbol.  If *None*, creates ``Symbol('M', positive=True)``.
    """
    t, r, theta, phi = sp.symbols("t r theta phi")
    if M is None:
        M = sp.Symbol("M", positive=True)

    c = sp.Float(speed_of_light())
    r_s = 2 * sp.Float(gravitational_constant()) * M / c**2
    f = 1 - r_s / r

    g = sp.diag(-f, 1 / f, r**2, r**2 * sp.sin(theta) ** 2)
    return SymbolicMetric([t, r, theta, phi], g)


PROPERTIES = {
    "coordinates": ("t", "r", "theta", "phi"),
    "vacuum": True,
    "rotating": False,
    "singular_surfaces": ("r = 0", "r = r_s"),
}
