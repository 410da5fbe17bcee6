"""Tests for the physical constants."""

import math

from lightbubble import constants


class TestConstants:
    """Exact values of the fundamental constants."""

    def test_speed_of_light(self):
        assert constants.speed_of_light() == 299792458.0

    def test_gravitational_constant(self):
        assert constants.gravitational_constant() == 6.67430e-11

    def test_planck_constant(self):
        assert constants.planck_constant() == 6.62607015e-34

    def test_reduced_planck_constant_is_h_over_two_pi(self):
        """hbar is derived from h, not stored separately."""
        expected = constants.planck_constant() / (2 * math.pi)
        assert constants.reduced_planck_constant() == expected

    def test_reduced_planck_constant_value(self):
        assert math.isclose(
            constants.reduced_planck_constant(), 1.0545718176461565e-34, rel_tol=1e-15
        )

    def test_constants_are_python_floats(self):
        for fn in (
            constants.speed_of_light,
            constants.gravitational_constant,
            constants.planck_constant,
            constants.reduced_planck_constant,
        ):
            assert isinstance(fn(), float)
