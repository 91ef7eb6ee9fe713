"""
Elapsed time measurement and formatting.

Durations are integer milliseconds. They are formatted as ``H:MM:SS.mmm``
with an unbounded hour field, and split into integer fields that always add
back up to the original total.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class DurationParts:
    """
    A millisecond duration split into clock fields.

    Attributes:
        total: The original duration in milliseconds
        hours: Whole hours (unbounded)
        minutes: Minutes within the hour (0-59)
        seconds: Seconds within the minute (0-59)
        milliseconds: Milliseconds within the second (0-999)
    """

    total: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}.{self.milliseconds:03d}"


def split_duration(ms: int) -> DurationParts:
    """
    Split a duration into hours, minutes, seconds and milliseconds.

    Raises:
        ValueError: If ms is negative
    """
    if ms < 0:
        msg = f"Duration must be non-negative, got {ms}"
        raise ValueError(msg)
    return DurationParts(
        total=ms,
        hours=ms // 3_600_000,
        minutes=ms // 60_000 % 60,
        seconds=ms // 1000 % 60,
        milliseconds=ms % 1000,
    )


def format_duration(ms: int) -> str:
    """Format a duration as ``H:MM:SS.mmm``."""
    return str(split_duration(ms))


class ReportClock:
    """
    Monotonic stopwatch with millisecond resolution.

    The clock starts when it is created and restarts on ``start()``.
    ``timer`` returns nanoseconds and is injectable for tests.
    """

    def __init__(self, timer: Callable[[], int] = time.monotonic_ns) -> None:
        self._timer = timer
        self._begin = timer()

    def start(self) -> None:
        """Restart the clock."""
        self._begin = self._timer()

    def elapsed(self) -> int:
        """Milliseconds since the last start."""
        return max(0, (self._timer() - self._begin) // 1_000_000)
