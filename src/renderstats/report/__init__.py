"""
Renderers for render statistics.

Output formats:
    - Log: Plain text lines through the ``renderstats.report`` logger
    - JSON: One structured document written to stdout or a file

Log output always includes cache occupancy and total rendering time. JSON
output includes only the requested categories.

Example:
    from renderstats.report import JsonRenderer, LogRenderer

    renderer = LogRenderer(["camera"])
    renderer.print_camera(camera)
"""

from renderstats.report.base import StatisticRenderer
from renderstats.report.console import LogRenderer
from renderstats.report.json import JsonRenderer

__all__ = [
    "StatisticRenderer",
    "LogRenderer",
    "JsonRenderer",
]
