"""
JSON renderer for renderstats.

Collects the summary into a dictionary and writes it as a single JSON
document when ``finish()`` is called. Every section, cache and time
included, is present only when its category is enabled.

Schema:
    cache:    {<name>: {entries, bytes, max_size}}
    time:     {time, total, milliseconds, seconds, minutes, hours}
    geometry: {dimensions, convex, contours|facets, bounding_box?}
              Nef solids: {dimensions, simple, vertices, edges, facets, volumes, bounding_box?}
    camera:   {translation, rotation, distance, fov}
"""

import json
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import TracebackType
from typing import Any, TextIO

from renderstats.cache import CacheRegistry, read_cache_snapshots
from renderstats.errors import DestinationUnavailableError
from renderstats.report.base import StatisticRenderer
from renderstats.schema import BoundingBox, Camera, Category, GeometryKind
from renderstats.summary import GeometrySummary
from renderstats.timing import split_duration

# Counts that go into the document; halfedges/halffacets are log-only
DOCUMENT_COUNTS = ("contours", "vertices", "edges", "facets", "volumes")


def bounding_box_dict(bb: BoundingBox) -> dict[str, list[float]]:
    """Serialize a bounding box with its size."""
    return {
        "min": list(bb.min),
        "max": list(bb.max),
        "size": list(bb.size),
    }


class JsonRenderer(StatisticRenderer):
    """
    Renders statistics as one JSON document.

    The renderer writes to a text stream it was given (stdout by default), or
    to a file it opened itself through ``to_file()``. It is a context manager and always closes a
    file it owns.

    Usage:
        with JsonRenderer.to_file("summary.json", ["all"]) as renderer:
            renderer.print_rendering_time(1234)
            renderer.finish()

    Attributes:
        report: The document collected so far
    """

    def __init__(
        self,
        categories: Iterable["Category | str"] = (),
        caches: "CacheRegistry | Mapping[str, Any] | None" = None,
        nef_backend: bool = True,
        stream: TextIO | None = None,
        indent: int | None = 2,
        name: str = "<stream>",
    ) -> None:
        super().__init__(categories, caches, nef_backend)
        self.report: dict[str, Any] = {}
        self.indent = indent
        self.name = name
        self._stream = stream if stream is not None else sys.stdout
        self._owns_stream = False
        self._finished = False

    @classmethod
    def to_file(
        cls,
        path: str | Path,
        categories: Iterable["Category | str"] = (),
        caches: "CacheRegistry | Mapping[str, Any] | None" = None,
        nef_backend: bool = True,
        indent: int | None = 2,
    ) -> "JsonRenderer":
        """
        Create a renderer writing to a file, truncating it.

        Raises:
            DestinationUnavailableError: If the file can't be opened for writing
        """
        try:
            stream = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise DestinationUnavailableError(path=str(path), underlying_error=str(e)) from e

        renderer = cls(categories, caches, nef_backend, stream=stream, indent=indent, name=str(path))
        renderer._owns_stream = True
        return renderer

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def print_cache_statistic(self) -> None:
        if self.is_enabled(Category.CACHE):
            self.report["cache"] = {
                snapshot.name: snapshot.to_dict()
                for snapshot in read_cache_snapshots(self.caches)
            }

    def print_rendering_time(self, ms: int) -> None:
        if self.is_enabled(Category.TIME):
            parts = split_duration(ms)
            self.report["time"] = {
                "time": str(parts),
                "total": parts.total,
                "milliseconds": parts.milliseconds,
                "seconds": parts.seconds,
                "minutes": parts.minutes,
                "hours": parts.hours,
            }

    def print_summary(self, summary: GeometrySummary) -> None:
        if not self.is_enabled(Category.GEOMETRY):
            return
        # Lists have no geometry section of their own
        if summary.kind == GeometryKind.LIST:
            return

        geometry: dict[str, Any] = {"dimensions": summary.dimensions}
        if summary.convex is not None:
            geometry["convex"] = summary.convex
        if summary.simple is not None:
            geometry["simple"] = summary.simple
        for name in DOCUMENT_COUNTS:
            if name in summary.counts:
                geometry[name] = summary.counts[name]
        if summary.bounding_box is not None and self.is_enabled(Category.BOUNDING_BOX):
            geometry["bounding_box"] = bounding_box_dict(summary.bounding_box)
        self.report["geometry"] = geometry

    def print_camera(self, camera: Camera) -> None:
        if self.is_enabled(Category.CAMERA):
            self.report["camera"] = {
                "translation": list(camera.translation),
                "rotation": list(camera.rotation),
                "distance": camera.distance,
                "fov": camera.fov,
            }

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def finish(self) -> None:
        """
        Write the document in a single write. Later calls do nothing.

        Raises:
            ValueError: If the document holds a non-finite number
            DestinationUnavailableError: If the write fails
        """
        if self._finished:
            return

        # Strict JSON: inf/nan are rejected rather than written as bare tokens
        text = json.dumps(self.report, indent=self.indent, allow_nan=False) + "\n"
        self._finished = True

        if self._stream is None:
            return

        try:
            self._stream.write(text)
            self._stream.flush()
        except OSError as e:
            raise DestinationUnavailableError(path=self.name, underlying_error=str(e)) from e

    @property
    def closed(self) -> bool:
        return self._stream is None or self._stream.closed

    def close(self) -> None:
        """Close the destination file if this renderer opened it."""
        if self._owns_stream and self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> "JsonRenderer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
