"""
Unit tests for time formatting and the report clock.

Tests cover:
- H:MM:SS.mmm formatting
- Decomposition into integer fields
- ReportClock start/elapsed
"""

import pytest

from renderstats.timing import ReportClock, format_duration, split_duration


class TestFormatDuration:
    """Tests for format_duration()."""

    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (0, "0:00:00.000"),
            (7, "0:00:00.007"),
            (1234, "0:00:01.234"),
            (61_001, "0:01:01.001"),
            (3_599_999, "0:59:59.999"),
            (3_600_000, "1:00:00.000"),
            (123 * 3_600_000 + 4 * 60_000 + 5_006, "123:04:05.006"),
        ],
    )
    def test_format(self, ms: int, expected: str) -> None:
        assert format_duration(ms) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_duration(-1)


class TestSplitDuration:
    """Tests for split_duration()."""

    @pytest.mark.parametrize(
        "ms",
        [0, 1, 999, 1000, 59_999, 60_000, 3_599_999, 3_600_000, 86_399_999, 360_000_001, 2**40],
    )
    def test_fields_add_back_up(self, ms: int) -> None:
        parts = split_duration(ms)
        assert parts.total == ms
        assert (
            parts.hours * 3_600_000
            + parts.minutes * 60_000
            + parts.seconds * 1000
            + parts.milliseconds
        ) == ms
        assert 0 <= parts.minutes < 60
        assert 0 <= parts.seconds < 60
        assert 0 <= parts.milliseconds < 1000

    def test_string_matches_fields(self) -> None:
        parts = split_duration(5_025_678)
        assert (parts.hours, parts.minutes, parts.seconds, parts.milliseconds) == (1, 23, 45, 678)
        assert str(parts) == "1:23:45.678"

    def test_sweep(self) -> None:
        for ms in range(0, 10_000_000, 9_973):
            parts = split_duration(ms)
            assert str(parts) == (
                f"{parts.hours}:{parts.minutes:02d}:{parts.seconds:02d}.{parts.milliseconds:03d}"
            )
            assert parts.hours * 3_600_000 + parts.minutes * 60_000 + parts.seconds * 1000 + parts.milliseconds == ms


class FakeTimer:
    """Nanosecond timer advanced by hand."""

    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


class TestReportClock:
    """Tests for ReportClock."""

    def test_elapsed_since_creation(self) -> None:
        timer = FakeTimer()
        clock = ReportClock(timer)
        timer.now = 1_500_000_000
        assert clock.elapsed() == 1500

    def test_start_resets(self) -> None:
        timer = FakeTimer()
        clock = ReportClock(timer)
        timer.now = 5_000_000_000
        clock.start()
        timer.now = 5_250_900_000
        assert clock.elapsed() == 250

    def test_millisecond_truncation(self) -> None:
        timer = FakeTimer()
        clock = ReportClock(timer)
        timer.now = 999_999
        assert clock.elapsed() == 0

    def test_real_clock_non_decreasing(self) -> None:
        clock = ReportClock()
        readings = [clock.elapsed() for _ in range(100)]
        assert readings[0] >= 0
        assert readings == sorted(readings)
