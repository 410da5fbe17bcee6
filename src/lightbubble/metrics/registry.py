"""Named lookup of the closed-form spacetimes and their analytical properties.

The registry is a simple Python class (not an eqx.Module) since it is
metadata infrastructure, not traced by JAX.  Properties are frozen
dataclasses built from immutable values, so one registry cannot alter what
another reports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

from ..geometry.metric import MetricSpecification
from .flrw import FLRWMetric, PROPERTIES as FLRW_PROPS
from .kerr import KerrMetric, PROPERTIES as KERR_PROPS
from .minkowski import MinkowskiMetric, PROPERTIES as MINKOWSKI_PROPS
from .morris_thorne import MorrisThorneMetric, PROPERTIES as MORRIS_THORNE_PROPS
from .schwarzschild import SchwarzschildMetric, PROPERTIES as SCHWARZSCHILD_PROPS

logger = logging.getLogger(__name__)

# Reference parameters for the default registry entries.
EARTH_MASS = 5.972e24  # kg
SOLAR_MASS = 1.989e30  # kg


@dataclass(frozen=True)
class SpacetimeProperties:
    """Known analytical properties of a spacetime.

    Parameters
    ----------
    coordinates : tuple[str, ...]
        Labels of the four coordinates, in index order.
    vacuum : bool
        Whether the metric solves the vacuum field equations.
    rotating : bool
        Whether the source carries angular momentum (non-zero g_tphi).
    singular_surfaces : tuple[str, ...]
        Where the metric components diverge or become undefined.
    """

    coordinates: tuple[str, ...]
    vacuum: bool
    rotating: bool = False
    singular_surfaces: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.coordinates) != 4:
            raise ValueError(
                f"Expected 4 coordinate labels, got {len(self.coordinates)}"
            )
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "coordinates", tuple(self.coordinates))
        object.__setattr__(self, "singular_surfaces", tuple(self.singular_surfaces))


class RegistryEntry(NamedTuple):
    """A registered metric and its properties; unpacks as ``metric, props``."""

    metric: MetricSpecification
    properties: SpacetimeProperties


class MetricRegistry:
    """Registry of closed-form spacetimes keyed by ``metric.name()``.

    Usage::

        registry = create_default_registry()
        metric, props = registry.get("Kerr")
        print(props.rotating)  # True
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}

    def register(
        self, metric: MetricSpecification, properties: SpacetimeProperties
    ) -> None:
        """Add *metric*, replacing any earlier metric of the same name."""
        name = metric.name()
        if name in self._entries:
            logger.debug("Replacing registered metric %r", name)
        self._entries[name] = RegistryEntry(metric, properties)

    def get(self, name: str) -> RegistryEntry:
        """Look up a metric and its properties by name.

        Raises
        ------
        KeyError
            If *name* is not registered.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise KeyError(
                f"Metric '{name}' not registered.  "
                f"Available: {self.list_metrics()}"
            ) from None

    def select(
        self, predicate: Callable[[SpacetimeProperties], bool]
    ) -> list[str]:
        """Sorted names of the metrics whose properties satisfy *predicate*."""
        return sorted(
            name
            for name, entry in self._entries.items()
            if predicate(entry.properties)
        )

    def list_metrics(self) -> list[str]:
        """Return sorted list of registered metric names."""
        return self.select(lambda _: True)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries


def create_default_registry() -> MetricRegistry:
    """Create a registry pre-loaded with every spacetime at reference parameters.

    Earth-mass Schwarzschild, a solar-mass Kerr hole with J = 1e40 kg m^2/s,
    a 1 km Morris-Thorne throat and a flat FLRW universe at a = 1.
    """
    registry = MetricRegistry()
    for metric, props in (
        (MinkowskiMetric(), MINKOWSKI_PROPS),
        (SchwarzschildMetric(mass=EARTH_MASS), SCHWARZSCHILD_PROPS),
        (KerrMetric(mass=SOLAR_MASS, angular_momentum=1.0e40), KERR_PROPS),
        (MorrisThorneMetric(throat_radius=1.0e3), MORRIS_THORNE_PROPS),
        (FLRWMetric(scale_factor=1.0, curvature=0.0), FLRW_PROPS),
    ):
        registry.register(metric, SpacetimeProperties(**props))
    logger.debug("Default registry holds %s", registry.list_metrics())
    return registry
