"""Survey of the registered spacetimes.

Evaluates every metric in the default registry along a radial line and
reports where it stops being finite, then cross-checks each numeric metric
against its SymPy form.

Shows:
- batched evaluation with evaluate_metric_batch
- horizons and throats appear as inf/nan samples, not exceptions
- the SymPy-to-JAX bridge reproduces the numeric metric
"""

import jax.numpy as jnp

from lightbubble.geometry import build_radial_batch, evaluate_metric_batch, sympy_metric_to_jax
from lightbubble.metrics import create_default_registry

PARAMETER_VALUES = {
    "Schwarzschild": lambda m: {"M": m.mass},
    "Kerr": lambda m: {"M": m.mass, "J": m.angular_momentum},
    "Morris-Thorne": lambda m: {"b": m.throat_radius},
    "FLRW": lambda m: {"a": m.scale_factor, "k": m.curvature},
}

registry = create_default_registry()
radii = jnp.concatenate([jnp.linspace(0.0, 5.0e3, 11), jnp.array([1.0e6])])
batch = build_radial_batch(radii, theta=1.0)

print("Radial metric survey")
print("=" * 40)
for name in registry.list_metrics():
    metric, props = registry.get(name)
    gs = evaluate_metric_batch(metric, batch)
    finite = jnp.all(jnp.isfinite(gs), axis=(1, 2))
    bad = [f"{float(r):.0f}" for r, ok in zip(radii, finite) if not ok]
    print(f"{name:14s} coords={props.coordinates} singular at r in {bad or 'none'}")

print("\nSymPy cross-check (max relative difference at r = 1e6 m)")
for name in registry.list_metrics():
    metric, _ = registry.get(name)
    sm = metric.symbolic()
    values = PARAMETER_VALUES.get(name, lambda m: {})(metric)
    sm = sm.subs({s: values[str(s)] for s in sm.parameters})
    g_num = metric(batch[-1])
    g_sym = sympy_metric_to_jax(sm)(batch[-1])
    scale = jnp.maximum(jnp.abs(g_num), 1e-300)
    print(f"{name:14s} {float(jnp.max(jnp.abs(g_num - g_sym) / scale)):.2e}")
