"""
renderstats - Statistics summaries for computed geometry results.

After a geometric model has been computed, renderstats reports:
- Shape metrics: facets, vertices, contours, convexity, manifold validity
- Bounding box and area
- Cache occupancy
- Total rendering time
- Camera framing

The summary goes either to the log (line by line) or to a JSON document on
stdout or in a file, with the caller choosing which categories appear.

Example usage:
    $ renderstats summarize cube.yaml --summary all --summary-file -
"""

from renderstats.engine import RenderStatistic
from renderstats.errors import DestinationUnavailableError, RenderStatsError

__version__ = "0.1.0"
__author__ = "renderstats Contributors"

__all__ = [
    "__version__",
    "__author__",
    "RenderStatistic",
    "RenderStatsError",
    "DestinationUnavailableError",
]
