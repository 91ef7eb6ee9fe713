"""
Base class for statistic renderers.

A renderer receives the report sections in a fixed order (cache, time,
geometry, camera) and then ``finish()``. Each renderer decides on its own
how a section is gated and where it goes:

- LogRenderer: writes lines to a logger as soon as a section arrives
- JsonRenderer: collects a document and writes it once in finish()

Geometry is reduced to a GeometrySummary before it reaches a renderer, so
renderers never look at concrete geometry types.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from renderstats.cache import CacheRegistry
from renderstats.filter import CategoryFilter
from renderstats.schema import Camera, Category
from renderstats.summary import GeometrySummary, summarize


class StatisticRenderer(ABC):
    """
    Abstract base class for statistic renderers.

    Subclasses must implement:
    - print_cache_statistic(): Report cache occupancy
    - print_rendering_time(): Report elapsed time
    - print_summary(): Report a geometry summary
    - print_camera(): Report camera framing
    - finish(): Deliver whatever is still pending

    Attributes:
        categories: Filter over the requested category names
        caches: Caches to report occupancy for
        nef_backend: Whether Nef solids are summarized
    """

    def __init__(
        self,
        categories: Iterable["Category | str"] = (),
        caches: "CacheRegistry | Mapping[str, Any] | None" = None,
        nef_backend: bool = True,
    ) -> None:
        self.categories = CategoryFilter(categories)
        self.caches = caches
        self.nef_backend = nef_backend

    def is_enabled(self, name: "Category | str") -> bool:
        return self.categories.is_enabled(name)

    def print_geometry(self, geometry: Any) -> None:
        """Summarize a geometry result and report it, if there is anything to report."""
        summary = summarize(geometry, nef_backend=self.nef_backend)
        if summary is not None:
            self.print_summary(summary)

    @abstractmethod
    def print_cache_statistic(self) -> None:
        ...

    @abstractmethod
    def print_rendering_time(self, ms: int) -> None:
        ...

    @abstractmethod
    def print_summary(self, summary: GeometrySummary) -> None:
        ...

    @abstractmethod
    def print_camera(self, camera: Camera) -> None:
        ...

    @abstractmethod
    def finish(self) -> None:
        ...
