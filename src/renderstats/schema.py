"""
Schema definitions for renderstats.

This module defines the Pydantic models the reporting layer reads:
- BoundingBox: Axis-aligned bounds of a 2D or 3D shape
- Geometry variants: EmptyGeometry, GeometryList, Polygon2D, Solid3D, NefSolid3D
- Camera: Viewport translation, rotation, distance and field of view
- Category: Names accepted by the summary category filter

Design Decisions:
    - Geometry is a closed tagged union discriminated on ``kind``
    - All models are frozen: reports only ever read them
    - Numbers must be finite; inf and nan have no JSON representation
    - Geometry and camera documents load from YAML (JSON is valid YAML)
"""

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from renderstats.errors import ConfigLoadError


# =============================================================================
# Enums
# =============================================================================


class Category(str, Enum):
    """
    Summary categories a caller may request.

    ALL enables every category, including ones this version does not know.
    """

    ALL = "all"
    GEOMETRY = "geometry"
    BOUNDING_BOX = "bounding_box"
    AREA = "area"
    CAMERA = "camera"
    CACHE = "cache"
    TIME = "time"


class GeometryKind(str, Enum):
    """Tag of each geometry variant."""

    EMPTY = "empty"
    LIST = "list"
    POLYGON_2D = "polygon2d"
    SOLID_3D = "solid3d"
    NEF_SOLID_3D = "nef3d"


# =============================================================================
# Geometry Models
# =============================================================================


class BoundingBox(BaseModel):
    """
    Axis-aligned bounding box.

    Both corners carry the same number of components (2 or 3). A degenerate
    box with min > max on some axis is accepted; it is reported, not fixed.

    Attributes:
        min: Lower corner
        max: Upper corner
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    min: tuple[float, ...] = Field(..., description="Lower corner")
    max: tuple[float, ...] = Field(..., description="Upper corner")

    @model_validator(mode="after")
    def validate_corners(self) -> "BoundingBox":
        """Both corners must be 2D or 3D and agree on dimensionality."""
        if len(self.min) not in (2, 3):
            msg = f"Bounding box must have 2 or 3 components, got {len(self.min)}"
            raise ValueError(msg)
        if len(self.min) != len(self.max):
            msg = "Bounding box corners have different dimensions"
            raise ValueError(msg)
        return self

    @property
    def dimensions(self) -> int:
        return len(self.min)

    @property
    def size(self) -> tuple[float, ...]:
        """Extent along each axis (max - min)."""
        return tuple(hi - lo for lo, hi in zip(self.min, self.max))


class EmptyGeometry(BaseModel):
    """A result with nothing in it."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: Literal["empty"] = "empty"

    def is_empty(self) -> bool:
        return True


class GeometryList(BaseModel):
    """
    A top-level result made of several objects.

    Only the number of children is reported; children are never summarized.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: Literal["list"] = "list"
    children: int = Field(default=0, description="Number of child objects", ge=0)

    def is_empty(self) -> bool:
        return self.children == 0


class Polygon2D(BaseModel):
    """
    A 2D polygon result.

    Attributes:
        bounding_box: 2D bounds
        outlines: Number of contours
        area: Enclosed area
        convex: Whether the polygon is convex (as computed by the engine)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: Literal["polygon2d"] = "polygon2d"
    bounding_box: BoundingBox
    outlines: int = Field(default=0, ge=0)
    area: float = Field(default=0.0)
    convex: bool = Field(default=False)

    def is_empty(self) -> bool:
        return self.outlines == 0


class Solid3D(BaseModel):
    """
    A 3D polyhedral mesh result.

    Attributes:
        bounding_box: 3D bounds
        facets: Number of facets
        convex: Whether the mesh is convex (as computed by the engine)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: Literal["solid3d"] = "solid3d"
    bounding_box: BoundingBox
    facets: int = Field(default=0, ge=0)
    convex: bool = Field(default=False)

    def is_empty(self) -> bool:
        return self.facets == 0


class NefSolid3D(BaseModel):
    """
    A 3D Nef polyhedron result from the optional exact-arithmetic backend.

    ``simple`` is false when the solid is not a valid 2-manifold.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: Literal["nef3d"] = "nef3d"
    bounding_box: BoundingBox
    simple: bool = Field(default=True)
    vertices: int = Field(default=0, ge=0)
    halfedges: int = Field(default=0, ge=0)
    edges: int = Field(default=0, ge=0)
    halffacets: int = Field(default=0, ge=0)
    facets: int = Field(default=0, ge=0)
    volumes: int = Field(default=0, ge=0)

    def is_empty(self) -> bool:
        return self.vertices == 0


Geometry = Annotated[
    Union[EmptyGeometry, GeometryList, Polygon2D, Solid3D, NefSolid3D],
    Field(discriminator="kind"),
]

_geometry_adapter: TypeAdapter[Any] = TypeAdapter(Geometry)


# =============================================================================
# Camera
# =============================================================================


class Camera(BaseModel):
    """
    Viewport state at the time the report is produced.

    Attributes:
        translation: Viewport translation (x, y, z)
        rotation: Viewport rotation in degrees (x, y, z)
        distance: Distance from the camera to the center of rotation
        fov: Field of view in degrees
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    translation: tuple[float, float, float] = Field(default=(0.0, 0.0, 0.0))
    rotation: tuple[float, float, float] = Field(default=(55.0, 0.0, 25.0))
    distance: float = Field(default=140.0, gt=0)
    fov: float = Field(default=22.5, gt=0, lt=180)

    @classmethod
    def from_arguments(cls, values: Sequence[float], fov: float | None = None) -> "Camera":
        """
        Build a camera from ``tx,ty,tz,rx,ry,rz,distance`` values.

        Raises:
            ValueError: If the wrong number of values is given
        """
        if len(values) != 7:
            msg = f"Camera needs 7 values (tx,ty,tz,rx,ry,rz,distance), got {len(values)}"
            raise ValueError(msg)
        data: dict[str, Any] = {
            "translation": tuple(values[0:3]),
            "rotation": tuple(values[3:6]),
            "distance": values[6],
        }
        if fov is not None:
            data["fov"] = fov
        return cls(**data)


# =============================================================================
# YAML Loading Helpers
# =============================================================================


def read_document(path: Path | str) -> Any:
    """
    Read a YAML or JSON document.

    Raises:
        ConfigLoadError: If the file can't be read or parsed
    """
    path = Path(path)
    try:
        with path.open() as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigLoadError(path=str(path), underlying_error=str(e)) from e


def load_geometry(path: Path | str) -> EmptyGeometry | GeometryList | Polygon2D | Solid3D | NefSolid3D:
    """
    Load a geometry result from a YAML/JSON file.

    Raises:
        ConfigLoadError: If the file is unreadable or doesn't match a variant
    """
    data = read_document(path)
    try:
        return _geometry_adapter.validate_python(data)
    except ValidationError as e:
        raise ConfigLoadError(path=str(path), underlying_error=str(e)) from e


def load_geometry_from_string(content: str) -> EmptyGeometry | GeometryList | Polygon2D | Solid3D | NefSolid3D:
    """Load a geometry result from a YAML string."""
    data = yaml.safe_load(content)
    return _geometry_adapter.validate_python(data)


def load_camera(path: Path | str) -> Camera:
    """
    Load a camera from a YAML/JSON file.

    Raises:
        ConfigLoadError: If the file is unreadable or invalid
    """
    data = read_document(path)
    try:
        return Camera.model_validate(data or {})
    except ValidationError as e:
        raise ConfigLoadError(path=str(path), underlying_error=str(e)) from e
