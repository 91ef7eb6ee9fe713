"""
Pytest configuration and fixtures for renderstats tests.

This module provides shared fixtures used across unit and integration tests.
"""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from renderstats.cache import CacheRegistry, GeometryCache
from renderstats.schema import (
    BoundingBox,
    Camera,
    GeometryList,
    NefSolid3D,
    Polygon2D,
    Solid3D,
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI installs so they don't leak between tests."""
    logger = logging.getLogger("renderstats")
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def report_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture INFO and above from the renderstats loggers."""
    caplog.set_level(logging.INFO, logger="renderstats")
    return caplog


@pytest.fixture
def cube() -> Solid3D:
    """A unit cube with 12 triangular facets."""
    return Solid3D(
        bounding_box=BoundingBox(min=(0, 0, 0), max=(1, 1, 1)),
        facets=12,
        convex=True,
    )


@pytest.fixture
def square() -> Polygon2D:
    """A 10x5 rectangle with one contour."""
    return Polygon2D(
        bounding_box=BoundingBox(min=(-5, 0), max=(5, 5)),
        outlines=1,
        area=50.0,
        convex=True,
    )


@pytest.fixture
def nef_solid() -> NefSolid3D:
    """A valid (simple) Nef polyhedron cube."""
    return NefSolid3D(
        bounding_box=BoundingBox(min=(0, 0, 0), max=(2, 3, 4)),
        simple=True,
        vertices=8,
        halfedges=24,
        edges=12,
        halffacets=12,
        facets=6,
        volumes=2,
    )


@pytest.fixture
def broken_nef_solid() -> NefSolid3D:
    """A Nef polyhedron that is not a valid 2-manifold."""
    return NefSolid3D(
        bounding_box=BoundingBox(min=(0, 0, 0), max=(2, 1, 1)),
        simple=False,
        vertices=12,
        halfedges=40,
        edges=20,
        halffacets=22,
        facets=11,
        volumes=3,
    )


@pytest.fixture
def geometry_list() -> GeometryList:
    """A top-level list of three objects."""
    return GeometryList(children=3)


@pytest.fixture
def camera() -> Camera:
    """Camera at distance 10 with a 22.5 degree field of view."""
    return Camera(
        translation=(1.0, 2.0, 3.0),
        rotation=(55.0, 0.0, 25.0),
        distance=10.0,
        fov=22.5,
    )


@pytest.fixture
def caches() -> CacheRegistry:
    """A geometry cache with two entries and an unavailable Nef cache."""
    geometry_cache = GeometryCache(max_size_mb=100, title="Geometry cache")
    geometry_cache.insert("cube", object(), cost=1000)
    geometry_cache.insert("sphere", object(), cost=2500)

    registry = CacheRegistry()
    registry.register("geometry_cache", geometry_cache)
    registry.register("cgal_cache", None)
    return registry
