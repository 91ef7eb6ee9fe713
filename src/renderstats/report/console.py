"""
Log renderer for renderstats.

Writes the summary as plain text lines through a standard ``logging.Logger``,
one record per fact, as soon as each section arrives. Nothing is buffered, so
``finish()`` has nothing left to do.

Gating differs from the JSON renderer on purpose: cache occupancy and total
rendering time are always printed, whatever categories were requested.

Some consumers scrape these lines, so the headers ("Top level object is a
list of objects:", "Bounding box:", "Measurements:", "Camera:", "Total
rendering time:") and the number formats must stay as they are.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from renderstats.cache import CacheRegistry, read_cache_snapshots
from renderstats.report.base import StatisticRenderer
from renderstats.schema import BoundingBox, Camera, Category, GeometryKind
from renderstats.summary import GeometrySummary
from renderstats.timing import format_duration

logger = logging.getLogger("renderstats.report")

# Top level headers per geometry kind
HEADERS = {
    GeometryKind.LIST: "Top level object is a list of objects:",
    GeometryKind.POLYGON_2D: "Top level object is a 2D object:",
    GeometryKind.SOLID_3D: "Top level object is a 3D object:",
    GeometryKind.NEF_SOLID_3D: "Top level object is a 3D object:",
}

COUNT_LABELS = {
    "objects": "Objects:",
    "contours": "Contours:",
    "vertices": "Vertices:",
    "halfedges": "Halfedges:",
    "edges": "Edges:",
    "halffacets": "Halffacets:",
    "facets": "Facets:",
    "volumes": "Volumes:",
}

REPAIR_WARNING = "Object may not be a valid 2-manifold and may need repair!"


def _coords(values: Iterable[float]) -> str:
    return ", ".join(f"{v:.2f}" for v in values)


class LogRenderer(StatisticRenderer):
    """
    Renders statistics as log lines.

    Usage:
        renderer = LogRenderer(["bounding_box"], caches=registry)
        renderer.print_rendering_time(1234)
        renderer.print_geometry(geometry)
    """

    def __init__(
        self,
        categories: Iterable["Category | str"] = (),
        caches: "CacheRegistry | Mapping[str, Any] | None" = None,
        nef_backend: bool = True,
        log: logging.Logger | None = None,
    ) -> None:
        super().__init__(categories, caches, nef_backend)
        self.log = log or logger

    def print_cache_statistic(self) -> None:
        # always enabled
        for snapshot in read_cache_snapshots(self.caches):
            self.log.info("%s:", snapshot.title)
            self.log.info("   Entries:    %d", snapshot.entry_count)
            self.log.info("   Bytes:      %d", snapshot.bytes_used)
            self.log.info("   Max bytes:  %d", snapshot.byte_capacity)

    def print_rendering_time(self, ms: int) -> None:
        # always enabled
        self.log.info("Total rendering time: %s", format_duration(ms))

    def print_summary(self, summary: GeometrySummary) -> None:
        self.log.info(HEADERS[summary.kind])

        if summary.kind == GeometryKind.LIST:
            self.log.info("   Objects:    %d", summary.counts["objects"])
            return

        if summary.simple is not None:
            self.log.info("   Simple:     %6s", "yes" if summary.simple else "no")
        for name, value in summary.counts.items():
            self.log.info("   %-12s%6d", COUNT_LABELS[name], value)
        if summary.needs_repair:
            self.log.warning(REPAIR_WARNING)

        if summary.bounding_box is not None:
            self._print_bounding_box(summary.bounding_box)

        if summary.area is not None and self.is_enabled(Category.AREA):
            self.log.info("Measurements:")
            self.log.info("   Area: %.2f", summary.area)

    def _print_bounding_box(self, bb: BoundingBox) -> None:
        if not self.is_enabled(Category.BOUNDING_BOX):
            return
        self.log.info("Bounding box:")
        self.log.info("   Min:  %s", _coords(bb.min))
        self.log.info("   Max:  %s", _coords(bb.max))
        self.log.info("   Size: %s", _coords(bb.size))

    def print_camera(self, camera: Camera) -> None:
        if not self.is_enabled(Category.CAMERA):
            return
        self.log.info("Camera:")
        self.log.info("   Translation: %s", _coords(camera.translation))
        self.log.info("   Rotation:    %s", _coords(camera.rotation))
        self.log.info("   Distance:    %.2f", camera.distance)
        self.log.info("   FOV:         %.2f", camera.fov)

    def finish(self) -> None:
        pass
