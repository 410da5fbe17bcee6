"""Metric abstractions, symbolic forms and batched evaluation."""

from .grid import build_radial_batch, evaluate_metric_batch
from .metric import MetricSpecification, SymbolicMetric, sympy_metric_to_jax

__all__ = [
    "MetricSpecification",
    "SymbolicMetric",
    "build_radial_batch",
    "evaluate_metric_batch",
    "sympy_metric_to_jax",
]
