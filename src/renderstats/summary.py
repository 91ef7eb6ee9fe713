"""
Geometry summarizer.

Reduces a geometry result to the metrics both renderers print. This is the
only place that looks at the concrete geometry variant: one isinstance chain
over the closed variant set, no recursion into lists, no recomputation of
convexity or manifold validity (those are read as given).

Anything the chain doesn't recognise, an empty result, or a Nef solid when
the Nef backend is disabled all summarize to None, and the renderers omit
the geometry section.
"""

from dataclasses import dataclass, field
from typing import Any

from renderstats.schema import (
    BoundingBox,
    GeometryKind,
    GeometryList,
    NefSolid3D,
    Polygon2D,
    Solid3D,
)

_SUMMARIZED = (GeometryList, Polygon2D, Solid3D, NefSolid3D)


@dataclass(frozen=True)
class GeometrySummary:
    """
    Metrics extracted from one geometry result.

    Attributes:
        kind: Which variant was summarized
        dimensions: 2 or 3, None for lists
        counts: Ordered element counts (objects, contours, facets, ...)
        convex: Convexity flag, None where the variant has none
        simple: Manifold validity flag, Nef solids only
        area: Enclosed area, 2D only
        bounding_box: Bounds, None for lists
    """

    kind: GeometryKind
    dimensions: int | None = None
    counts: dict[str, int] = field(default_factory=dict)
    convex: bool | None = None
    simple: bool | None = None
    area: float | None = None
    bounding_box: BoundingBox | None = None

    @property
    def needs_repair(self) -> bool:
        """True when the solid is not a valid 2-manifold."""
        return self.simple is False


def summarize(geometry: Any, nef_backend: bool = True) -> GeometrySummary | None:
    """
    Summarize a geometry result.

    Args:
        geometry: A geometry variant, or None
        nef_backend: Whether Nef solids are supported in this build

    Returns:
        The summary, or None if there is nothing to report
    """
    if not isinstance(geometry, _SUMMARIZED) or geometry.is_empty():
        return None

    if isinstance(geometry, GeometryList):
        return GeometrySummary(
            kind=GeometryKind.LIST,
            counts={"objects": geometry.children},
        )
    if isinstance(geometry, Polygon2D):
        return GeometrySummary(
            kind=GeometryKind.POLYGON_2D,
            dimensions=2,
            counts={"contours": geometry.outlines},
            convex=geometry.convex,
            area=geometry.area,
            bounding_box=geometry.bounding_box,
        )
    if isinstance(geometry, Solid3D):
        return GeometrySummary(
            kind=GeometryKind.SOLID_3D,
            dimensions=3,
            counts={"facets": geometry.facets},
            convex=geometry.convex,
            bounding_box=geometry.bounding_box,
        )
    if isinstance(geometry, NefSolid3D):
        if not nef_backend:
            return None
        return GeometrySummary(
            kind=GeometryKind.NEF_SOLID_3D,
            dimensions=3,
            counts={
                "vertices": geometry.vertices,
                "halfedges": geometry.halfedges,
                "edges": geometry.edges,
                "halffacets": geometry.halffacets,
                "facets": geometry.facets,
                "volumes": geometry.volumes,
            },
            simple=geometry.simple,
            bounding_box=geometry.bounding_box,
        )
    return None
