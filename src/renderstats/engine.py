"""
Report orchestration for renderstats.

RenderStatistic owns the render clock and drives one renderer through the
report sections in a fixed order:

    1. Cache occupancy
    2. Total rendering time (since the last start())
    3. Geometry summary, skipped entirely for an absent or empty result
    4. Camera
    5. finish()

The destination picks the renderer:
    - None or ""  -> LogRenderer
    - "-"         -> JsonRenderer writing to standard output
    - any path    -> JsonRenderer writing to that file (truncated)
"""

import logging
import sys
from collections.abc import Iterable, Mapping
from typing import Any

from renderstats.cache import CacheRegistry
from renderstats.report import JsonRenderer, LogRenderer, StatisticRenderer
from renderstats.schema import Camera, Category
from renderstats.timing import ReportClock

STDOUT_DESTINATION = "-"


class RenderStatistic:
    """
    Produces statistics reports for a computed geometry result.

    Usage:
        stats = RenderStatistic(caches=registry)
        stats.start()
        geometry = compute()
        stats.print_all(geometry, camera, ["all"], destination="-")

    Attributes:
        caches: Caches whose occupancy is reported
        clock: Measures time since start()
        nef_backend: Whether Nef solids are summarized
        indent: JSON indentation (None for compact output)
    """

    def __init__(
        self,
        caches: "CacheRegistry | Mapping[str, Any] | None" = None,
        log: logging.Logger | None = None,
        clock: ReportClock | None = None,
        nef_backend: bool = True,
        indent: int | None = 2,
    ) -> None:
        self.caches = caches
        self.log = log
        self.clock = clock or ReportClock()
        self.nef_backend = nef_backend
        self.indent = indent

    def start(self) -> None:
        """Restart the render clock."""
        self.clock.start()

    def elapsed(self) -> int:
        """Milliseconds since the last start()."""
        return self.clock.elapsed()

    def _log_renderer(self, categories: Iterable["Category | str"] = ()) -> LogRenderer:
        return LogRenderer(categories, self.caches, self.nef_backend, log=self.log)

    def print_cache_statistic(self) -> None:
        """Log cache occupancy only."""
        self._log_renderer().print_cache_statistic()

    def print_rendering_time(self) -> None:
        """Log the time since start() only."""
        self._log_renderer().print_rendering_time(self.elapsed())

    def print_all(
        self,
        geometry: Any,
        camera: Camera,
        categories: Iterable["Category | str"] = (),
        destination: str | None = None,
    ) -> None:
        """
        Report every section to the renderer chosen by destination.

        Args:
            geometry: The computed geometry result (may be None)
            camera: Current camera state
            categories: Requested category names
            destination: None/"" for the log, "-" for stdout, else a file path

        Raises:
            DestinationUnavailableError: If the destination file can't be written
        """
        categories = list(categories)

        if not destination:
            self._run(self._log_renderer(categories), geometry, camera)
        elif destination == STDOUT_DESTINATION:
            renderer = JsonRenderer(
                categories,
                self.caches,
                self.nef_backend,
                stream=sys.stdout,
                indent=self.indent,
                name="<stdout>",
            )
            self._run(renderer, geometry, camera)
        else:
            with JsonRenderer.to_file(
                destination, categories, self.caches, self.nef_backend, indent=self.indent
            ) as renderer:
                self._run(renderer, geometry, camera)

    def _run(self, renderer: StatisticRenderer, geometry: Any, camera: Camera) -> None:
        renderer.print_cache_statistic()
        renderer.print_rendering_time(self.elapsed())
        # absent, empty and unknown results summarize to nothing
        renderer.print_geometry(geometry)
        renderer.print_camera(camera)
        renderer.finish()
