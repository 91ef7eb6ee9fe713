"""
Configuration for renderstats.

A ReportConfig holds the defaults for a summary run: which categories to
report, where to send them, and how the caches are sized. It is loaded from
YAML and can be overridden from the command line.

Example config:
    categories: [geometry, bounding_box]
    destination: summary.json
    indent: 2
    nef_backend: true
    geometry_cache_mb: 100
    nef_cache_mb: 100
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from renderstats.cache import CacheRegistry, GeometryCache
from renderstats.errors import ConfigLoadError
from renderstats.schema import read_document


class ReportConfig(BaseModel):
    """
    Defaults for a summary run.

    Attributes:
        categories: Requested category names (unknown names are ignored)
        destination: None for the log, "-" for stdout, else a JSON file path
        indent: JSON indentation, None for compact output
        nef_backend: Whether the Nef solid backend (and its cache) is available
        geometry_cache_mb: Geometry cache capacity in megabytes
        nef_cache_mb: Nef solid cache capacity in megabytes
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    categories: list[str] = Field(
        default_factory=list,
        description="Requested summary categories",
    )
    destination: str | None = Field(
        default=None,
        description="Summary destination: unset for log, '-' for stdout, else a file",
    )
    indent: int | None = Field(
        default=2,
        description="JSON indentation (None for compact)",
        ge=0,
    )
    nef_backend: bool = Field(
        default=True,
        description="Whether Nef solids are supported",
    )
    geometry_cache_mb: int = Field(
        default=100,
        description="Geometry cache capacity in megabytes",
        ge=0,
    )
    nef_cache_mb: int = Field(
        default=100,
        description="Nef solid cache capacity in megabytes",
        ge=0,
    )


def load_config(path: Path | str) -> ReportConfig:
    """
    Load a config from a YAML file.

    Raises:
        ConfigLoadError: If the file is unreadable or invalid
    """
    data = read_document(path)
    try:
        return ReportConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigLoadError(path=str(path), underlying_error=str(e)) from e


def load_config_from_string(content: str) -> ReportConfig:
    """Load a config from a YAML string."""
    data = yaml.safe_load(content)
    return ReportConfig.model_validate(data or {})


def build_caches(config: ReportConfig) -> CacheRegistry:
    """
    Create the cache registry described by a config.

    The Nef cache slot is registered as unavailable (None) when the Nef
    backend is disabled.
    """
    registry = CacheRegistry()
    registry.register(
        "geometry_cache",
        GeometryCache(max_size_mb=config.geometry_cache_mb, title="Geometry cache"),
    )
    registry.register(
        "cgal_cache",
        GeometryCache(max_size_mb=config.nef_cache_mb, title="CGAL cache") if config.nef_backend else None,
    )
    return registry
