"""
Unit tests for the geometry summarizer.

Tests cover:
- One summary per variant
- Empty, absent and unknown results
- Nef solids with and without the Nef backend
"""

from renderstats.schema import (
    EmptyGeometry,
    GeometryKind,
    GeometryList,
    NefSolid3D,
    Polygon2D,
    Solid3D,
)
from renderstats.summary import summarize


class TestSummarize:
    """Tests for summarize()."""

    def test_list(self, geometry_list: GeometryList) -> None:
        summary = summarize(geometry_list)
        assert summary is not None
        assert summary.kind == GeometryKind.LIST
        assert summary.counts == {"objects": 3}
        assert summary.dimensions is None
        assert summary.bounding_box is None

    def test_polygon(self, square: Polygon2D) -> None:
        summary = summarize(square)
        assert summary is not None
        assert summary.kind == GeometryKind.POLYGON_2D
        assert summary.dimensions == 2
        assert summary.counts == {"contours": 1}
        assert summary.convex is True
        assert summary.area == 50.0
        assert summary.simple is None
        assert summary.bounding_box == square.bounding_box

    def test_solid(self, cube: Solid3D) -> None:
        summary = summarize(cube)
        assert summary is not None
        assert summary.kind == GeometryKind.SOLID_3D
        assert summary.dimensions == 3
        assert summary.counts == {"facets": 12}
        assert summary.area is None
        assert not summary.needs_repair

    def test_nef(self, nef_solid: NefSolid3D) -> None:
        summary = summarize(nef_solid)
        assert summary is not None
        assert summary.kind == GeometryKind.NEF_SOLID_3D
        assert list(summary.counts) == [
            "vertices", "halfedges", "edges", "halffacets", "facets", "volumes",
        ]
        assert summary.counts["vertices"] == 8
        assert summary.simple is True
        assert summary.convex is None
        assert not summary.needs_repair

    def test_non_simple_nef_needs_repair(self, broken_nef_solid: NefSolid3D) -> None:
        summary = summarize(broken_nef_solid)
        assert summary is not None
        assert summary.simple is False
        assert summary.needs_repair

    def test_nef_without_backend_is_absent(self, nef_solid: NefSolid3D) -> None:
        assert summarize(nef_solid, nef_backend=False) is None

    def test_empty_results(self, cube: Solid3D) -> None:
        assert summarize(None) is None
        assert summarize(EmptyGeometry()) is None
        assert summarize(GeometryList(children=0)) is None
        assert summarize(Solid3D(bounding_box=cube.bounding_box, facets=0)) is None

    def test_unknown_object_is_absent(self) -> None:
        assert summarize(object()) is None
        assert summarize("solid") is None
