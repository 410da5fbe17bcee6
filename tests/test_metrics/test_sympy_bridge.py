"""SymPy-to-JAX bridge cross-validation tests.

For each metric, verifies that the JAX numeric evaluation matches the SymPy
symbolic form converted via sympy_metric_to_jax.  Parameter symbols are
substituted with the concrete values before lambdifying.
"""

import jax
import jax.numpy as jnp
import pytest
import sympy as sp

from lightbubble.geometry.metric import sympy_metric_to_jax
from lightbubble.metrics import (
    FLRWMetric,
    KerrMetric,
    MinkowskiMetric,
    MorrisThorneMetric,
    SchwarzschildMetric,
)

# ---------------------------------------------------------------------------
# Test coordinate points (t, r, theta, phi)
# ---------------------------------------------------------------------------

SPHERICAL_POINTS = [
    jnp.array([0.0, 6.371e6, 1.5707963267948966, 0.0]),  # equator
    jnp.array([0.0, 2.0e4, 0.3, 1.0]),                  # near pole
    jnp.array([5.0, 1.0e9, 2.5, 4.0]),                  # far field
]

COMOVING_POINTS = [
    jnp.array([0.0, 0.1, 1.0, 0.0]),
    jnp.array([0.0, 0.6, 0.2, 3.0]),
]


def _assert_bridge_matches(metric, values, points, rtol=1e-12):
    sm = metric.symbolic()
    subs = {s: values[str(s)] for s in sm.parameters}
    bridge_fn = sympy_metric_to_jax(sm.subs(subs))
    for coords in points:
        g_jax = metric(coords)
        g_bridge = bridge_fn(coords)
        assert jnp.allclose(g_jax, g_bridge, rtol=rtol, atol=1e-300), (
            f"{metric.name()} mismatch at {coords}: max diff = "
            f"{jnp.max(jnp.abs(g_jax - g_bridge))}"
        )


class TestSympyBridge:
    """Numeric metrics agree with their symbolic forms."""

    def test_minkowski(self):
        _assert_bridge_matches(MinkowskiMetric(), {}, SPHERICAL_POINTS)

    def test_schwarzschild(self):
        _assert_bridge_matches(
            SchwarzschildMetric(mass=1.989e30), {"M": 1.989e30}, SPHERICAL_POINTS
        )

    def test_kerr(self):
        _assert_bridge_matches(
            KerrMetric(mass=1.989e30, angular_momentum=1.0e41),
            {"M": 1.989e30, "J": 1.0e41},
            SPHERICAL_POINTS,
        )

    def test_morris_thorne(self):
        _assert_bridge_matches(
            MorrisThorneMetric(throat_radius=1.0e3), {"b": 1.0e3}, SPHERICAL_POINTS
        )

    @pytest.mark.parametrize("k", [-1.0, 0.0, 1.0])
    def test_flrw(self, k):
        _assert_bridge_matches(
            FLRWMetric(scale_factor=1.7, curvature=k),
            {"a": 1.7, "k": k},
            COMOVING_POINTS,
        )


class TestBridgeBehaviour:
    """Output dtype, jit compatibility, and unsubstituted parameters."""

    def test_bridge_float64(self):
        bridge_fn = sympy_metric_to_jax(MinkowskiMetric().symbolic())
        g = bridge_fn(jnp.array([0.0, 1.0, 2.0, 3.0]))
        assert g.dtype == jnp.float64

    def test_bridge_jit(self):
        sm = SchwarzschildMetric(mass=1.0e30).symbolic()
        bridge_fn = sympy_metric_to_jax(sm.subs({sp.Symbol("M", positive=True): 1.0e30}))
        g = jax.jit(bridge_fn)(SPHERICAL_POINTS[0])
        assert g.shape == (4, 4)
        assert g.dtype == jnp.float64

    def test_unsubstituted_parameters_rejected(self):
        sm = KerrMetric(mass=1.0, angular_momentum=1.0).symbolic()
        with pytest.raises(ValueError, match="J"):
            sympy_metric_to_jax(sm)
