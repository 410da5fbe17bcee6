"""Kerr spacetime (rotating, uncharged black hole) in Boyer-Lindquist coordinates.

With spin length a = J / (M c), Schwarzschild radius r_s = 2 G M / c^2 and

    rho^2   = r^2 + a^2 cos^2(theta)
    Delta   = r^2 - r_s r + a^2

the non-zero components are

    g_tt      = -(1 - r_s r / rho^2)
    g_tphi    = g_phit = -r_s r a sin^2(theta) / rho^2
    g_rr      = rho^2 / Delta
    g_thth    = rho^2
    g_phiphi  = (r^2 + a^2 + r_s r a^2 sin^2(theta) / rho^2) sin^2(theta)

The (t, phi) cross term is the frame-dragging term; it is the only
off-diagonal entry of any metric in this package.  Singular where
Delta = 0 (horizons) and for M = 0 (spin length undefined).
"""

from __future__ import annotations

import jax.numpy as jnp
import sympy as sp
from beartype import beartype
from jaxtyping import Array, ArrayLike, Float, jaxtyped

from ..constants import gravitational_constant, speed_of_light
from ..geometry.metric import MetricSpecification, SymbolicMetric
from .schwarzschild import schwarzschild_radius


def spin_length(
    mass: Float[ArrayLike, "..."], angular_momentum: Float[ArrayLike, "..."]
) -> Float[Array, "..."]:
    """Kerr spin parameter a = J / (M c) in meters."""
    mass = jnp.asarray(mass, dtype=jnp.float64)
    angular_momentum = jnp.asarray(angular_momentum, dtype=jnp.float64)
    return angular_momentum / (mass * speed_of_light())


class KerrMetric(MetricSpecification):
    """Kerr metric in ``(t, r, theta, phi)`` Boyer-Lindquist coordinates.

    Parameters
    ----------
    mass : float
        Black hole mass in kilograms.
    angular_momentum : float
        Angular momentum J in kg m^2 / s.
    """

    mass: float
    angular_momentum: float

    @jaxtyped(typechecker=beartype)
    def __call__(self, coords: Float[Array, "4"]) -> Float[Array, "4 4"]:
        _, r, theta, _ = coords
        r_s = schwarzschild_radius(self.mass)
        a = spin_length(self.mass, self.angular_momentum)
        sin2 = jnp.sin(theta) ** 2
        cos2 = jnp.cos(theta) ** 2

        rho2 = r * r + a * a * cos2
        delta = r * r - r_s * r + a * a
        g_tphi = -r_s * r * a * sin2 / rho2

        g = jnp.zeros((4, 4))
        g = g.at[0, 0].set(-(1.0 - r_s * r / rho2))
        g = g.at[0, 3].set(g_tphi)
        g = g.at[3, 0].set(g_tphi)
        g = g.at[1, 1].set(rho2 / delta)
        g = g.at[2, 2].set(rho2)
        g = g.at[3, 3].set((r * r + a * a + r_s * r * a * a * sin2 / rho2) * sin2)
        return g

    def symbolic(self) -> SymbolicMetric:
        """Return SymPy symbolic form for inspection and cross-validation."""
        return kerr_symbolic()

    def name(self) -> str:
        return "Kerr"


def kerr_symbolic(
    M: sp.Symbol | None = None, J: sp.Symbol | None = None
) -> SymbolicMetric:
    """Module-level convenience: symbolic Kerr metric.

    Parameters
    ----------
    M, J : sp.Symbol or None
        Mass and angular momentum symbols.  Created as positive symbols
        when omitted.
    """
    t, r, theta, phi = sp.symbols("t r theta phi")
    if M is None:
        M = sp.Symbol("M", positive=True)
    if J is None:
        J = sp.Symbol("J", positive=True)

    c = sp.Float(speed_of_light())
    r_s = 2 * sp.Float(gravitational_constant()) * M / c**2
    a = J / (M * c)
    sin2 = sp.sin(theta) ** 2
    rho2 = r**2 + a**2 * sp.cos(theta) ** 2
    delta = r**2 - r_s * r + a**2
    g_tphi = -r_s * r * a * sin2 / rho2

    g = sp.Matrix([
        [-(1 - r_s * r / rho2), 0, 0, g_tphi],
        [0, rho2 / delta, 0, 0],
        [0, 0, rho2, 0],
        [g_tphi, 0, 0, (r**2 + a**2 + r_s * r * a**2 * sin2 / rho2) * sin2],
    ])
    return SymbolicMetric([t, r, theta, phi], g)


PROPERTIES = {
    "coordinates": ("t", "r", "theta", "phi"),
    "vacuum": True,
    "rotating": True,
    "singular_surfaces": ("Delta = 0", "rho^2 = 0"),
}
