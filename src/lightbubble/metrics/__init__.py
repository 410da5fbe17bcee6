"""Closed-form spacetime metrics."""

from .flrw import FLRWMetric, flrw_symbolic
from .kerr import KerrMetric, kerr_symbolic, spin_length
from .minkowski import MinkowskiMetric, minkowski_symbolic
from .morris_thorne import MorrisThorneMetric, morris_thorne_symbolic
from .registry import MetricRegistry, SpacetimeProperties, create_default_registry
from .schwarzschild import SchwarzschildMetric, schwarzschild_radius, schwarzschild_symbolic
