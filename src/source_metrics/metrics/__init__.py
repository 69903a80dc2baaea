"""Per-file measurements, block extents and corpus aggregation."""

from .aggregator import MetricsAggregator, fold
from .blocks import BlockExtent, BlockExtentTracker, ExtentKind, track_extents
from .file_metrics import FileMetrics, line_complexity, measure_lines

__all__ = [
    "MetricsAggregator",
    "fold",
    "BlockExtent",
    "BlockExtentTracker",
    "ExtentKind",
    "track_extents",
    "FileMetrics",
    "line_complexity",
    "measure_lines",
]
