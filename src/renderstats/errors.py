"""
Exception hierarchy for renderstats.

All renderstats exceptions inherit from RenderStatsError, allowing callers to
catch every renderstats-specific exception with a single except clause.

Reporting is diagnostic, so almost every problem degrades gracefully (an
unknown geometry kind or a missing cache just drops its section). Only two
families of errors are raised:

Exception Categories:
    - DestinationUnavailableError: The report file could not be opened or written
    - ConfigLoadError: A config, geometry or camera document is unreadable
"""

from dataclasses import dataclass, field
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================

# Destination errors: 1xxx
ERROR_DESTINATION_UNAVAILABLE = 1001

# Config errors: 2xxx
ERROR_CONFIG_LOAD = 2001


# =============================================================================
# Base Exception
# =============================================================================


@dataclass
class RenderStatsError(Exception):
    """
    Base exception for all renderstats errors.

    Attributes:
        message: Human-readable error description
        code: Numeric error code for programmatic handling
        suggestion: Optional hint for how to resolve the error
        context: Optional dict with additional debugging info
    """

    message: str = ""
    code: int = 0
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        parts = [f"[E{self.code}] {self.message}"]
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def __repr__(self) -> str:
        """Format error for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "suggestion": self.suggestion,
            "context": self.context,
        }


# =============================================================================
# Destination Errors
# =============================================================================


@dataclass
class DestinationUnavailableError(RenderStatsError):
    """
    Raised when a structured report cannot be delivered to its file.

    Attributes:
        path: The destination path that was requested
        underlying_error: The OS error text, if any
    """

    path: str = ""
    underlying_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Cannot write summary to {self.path}"
            if self.underlying_error:
                self.message += f": {self.underlying_error}"
        if self.code == 0:
            self.code = ERROR_DESTINATION_UNAVAILABLE
        if not self.suggestion:
            self.suggestion = "Check that the directory exists and is writable, or use '-' for stdout"
        self.context.update({
            "path": self.path,
            "underlying_error": self.underlying_error,
        })


# =============================================================================
# Config Errors
# =============================================================================


@dataclass
class ConfigError(RenderStatsError):
    """
    Base class for configuration and input document errors.

    Attributes:
        path: The file that was being loaded
    """

    path: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        self.context["path"] = self.path


@dataclass
class ConfigLoadError(ConfigError):
    """Raised when a YAML/JSON document cannot be read or validated."""

    underlying_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Failed to load {self.path}: {self.underlying_error}"
        if self.code == 0:
            self.code = ERROR_CONFIG_LOAD
        super().__post_init__()
        self.context["underlying_error"] = self.underlying_error
