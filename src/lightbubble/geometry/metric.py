"""Metric specification and the SymPy-JAX bridge.

Provides the abstract ``MetricSpecification`` (Equinox module / JAX pytree)
that every closed-form spacetime implements, the ``SymbolicMetric`` class
used to inspect those spacetimes with SymPy, and the lambdify bridge that
turns a symbolic metric back into a JAX callable for cross-validation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Callable, Mapping

import equinox as eqx
import jax.numpy as jnp
import sympy as sp
from jaxtyping import Array, Float
from sympy import lambdify


# ---------------------------------------------------------------------------
# SymbolicMetric
# ---------------------------------------------------------------------------


class SymbolicMetric:
    """Symbolic metric specification using SymPy.

    Holds a coordinate symbol list and a 4x4 SymPy Matrix representing
    the metric tensor *g_{ab}*.  Physical parameters (mass, spin, ...) may
    appear as additional free symbols; substitute them with :meth:`subs`
    before handing the metric to :func:`sympy_metric_to_jax`.

    Parameters
    ----------
    coords : list[sp.Symbol]
        Four coordinate symbols, e.g. ``[t, r, theta, phi]``.
    g_matrix : sp.Matrix
        Symmetric (4, 4) metric tensor expressed in *coords*.

    Raises
    ------
    ValueError
        If *coords* does not have length 4 or *g_matrix* is not (4, 4).
    """

    def __init__(self, coords: list[sp.Symbol], g_matrix: sp.Matrix) -> None:
        if len(coords) != 4:
            raise ValueError(
                f"Expected 4 coordinate symbols, got {len(coords)}"
            )
        if g_matrix.shape != (4, 4):
            raise ValueError(
                f"Expected (4, 4) metric matrix, got {g_matrix.shape}"
            )
        self.coords = list(coords)
        self.g = g_matrix

    @property
    def parameters(self) -> set[sp.Symbol]:
        """Free symbols of *g* that are not coordinates."""
        return set(self.g.free_symbols) - set(self.coords)

    def subs(self, values: Mapping[sp.Symbol, float]) -> SymbolicMetric:
        """Return a new metric with parameter symbols replaced by *values*."""
        return SymbolicMetric(self.coords, self.g.subs(dict(values)))


# ---------------------------------------------------------------------------
# MetricSpecification (abstract base Equinox module / JAX pytree)
# ---------------------------------------------------------------------------


class MetricSpecification(eqx.Module):
    """Abstract base for closed-form spacetime metrics.

    Subclasses define a pointwise mapping from a single coordinate point to
    the 4x4 metric tensor *g_{ab}* at that point.  The coordinate basis is
    fixed per subclass: ``(t, x, y, z)`` for flat space, ``(t, r, theta,
    phi)`` for the spherical solutions and ``(t, chi, theta, phi)`` for FLRW.

    Being an ``eqx.Module``, every ``MetricSpecification`` is automatically a
    JAX pytree, compatible with ``jax.jit``, ``jax.vmap``, and other
    transformations.  Physical parameters stored as regular (non-static)
    fields are treated as *dynamic* leaves, so the compiled code is reusable
    when only those values change.

    Singular points (horizons, wormhole throats, the origin) are not
    guarded: the metric there contains IEEE ``inf`` or ``nan`` entries.
    """

    @abstractmethod
    def __call__(self, coords: Float[Array, "4"]) -> Float[Array, "4 4"]:
        """Evaluate *g_{ab}* at a single spacetime point.

        Parameters
        ----------
        coords : Float[Array, "4"]
            Coordinates of the point in this metric's basis.

        Returns
        -------
        Float[Array, "4 4"]
            The metric tensor at the given point.
        """
        ...

    @abstractmethod
    def symbolic(self) -> SymbolicMetric:
        """Return the SymPy symbolic form for inspection and cross-validation."""
        ...

    @abstractmethod
    def name(self) -> str:
        """Human-readable metric name."""
        ...


# ---------------------------------------------------------------------------
# SymPy-to-JAX bridge
# ---------------------------------------------------------------------------


def sympy_metric_to_jax(
    symbolic_metric: SymbolicMetric,
) -> Callable[[Float[Array, "4"]], Float[Array, "4 4"]]:
    """Convert a SymPy metric to a JAX function matching the pointwise signature.

    Uses ``sympy.lambdify`` with ``modules='jax'`` to produce a callable
    that maps ``coords (4,) -> g_ab (4, 4)`` using ``jax.numpy`` operations.

    Parameters
    ----------
    symbolic_metric : SymbolicMetric
        Symbolic metric with ``.coords`` and ``.g`` attributes.  Every free
        symbol must be a coordinate.

    Returns
    -------
    Callable[[Float[Array, "4"]], Float[Array, "4 4"]]
        A JAX-compatible function evaluating the metric tensor.

    Raises
    ------
    ValueError
        If the metric still contains unsubstituted parameter symbols.
    """
    leftover = symbolic_metric.parameters
    if leftover:
        names = sorted(str(s) for s in leftover)
        raise ValueError(
            f"Substitute parameter symbols before lambdifying: {names}"
        )

    f_raw = lambdify(symbolic_metric.coords, symbolic_metric.g, modules="jax")

    def f_wrapped(coords: Float[Array, "4"]) -> Float[Array, "4 4"]:
        return jnp.asarray(f_raw(*coords), dtype=jnp.float64)

    return f_wrapped
