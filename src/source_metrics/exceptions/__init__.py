"""Exception hierarchy for source-metrics."""

from .analysis import AnalysisError, FileAccessError
from .base import SourceMetricsError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "SourceMetricsError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
