"""Tests for the metric framework: SymbolicMetric and its helpers."""

import pytest
import sympy as sp

from lightbubble.geometry.metric import SymbolicMetric
from lightbubble.metrics.schwarzschild import schwarzschild_symbolic


class TestSymbolicMetric:
    """Tests for the SymbolicMetric class."""

    def test_symbolic_metric_creation(self):
        """Create SymbolicMetric, verify coords and g."""
        t, x, y, z = sp.symbols("t x y z")
        g = sp.diag(-1, 1, 1, 1)
        sm = SymbolicMetric([t, x, y, z], g)
        assert sm.coords == [t, x, y, z]
        assert sm.g == g
        assert sm.g.shape == (4, 4)

    def test_parameters_exclude_coordinates(self):
        t, r, theta, phi = sp.symbols("t r theta phi")
        b = sp.Symbol("b")
        sm = SymbolicMetric([t, r, theta, phi], sp.diag(-1, 1 / (1 - b / r), r**2, r**2))
        assert sm.parameters == {b}

    def test_subs_returns_new_metric(self):
        sm = schwarzschild_symbolic()
        M = sp.Symbol("M", positive=True)
        concrete = sm.subs({M: 1.0e30})
        assert concrete is not sm
        assert concrete.parameters == set()
        assert sm.parameters == {M}
        assert concrete.coords == sm.coords

    def test_symbolic_metric_invalid_coords(self):
        """Verify ValueError for wrong number of coordinates."""
        x, y, z = sp.symbols("x y z")
        with pytest.raises(ValueError, match="4 coordinate symbols"):
            SymbolicMetric([x, y, z], sp.diag(-1, 1, 1, 1))

    def test_symbolic_metric_invalid_shape(self):
        """Verify ValueError for wrong matrix shape."""
        t, x, y, z = sp.symbols("t x y z")
        with pytest.raises(ValueError, match="\\(4, 4\\)"):
            SymbolicMetric([t, x, y, z], sp.diag(-1, 1, 1))
