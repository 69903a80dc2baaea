"""
source-metrics - line-based source code statistics

Scans Ruby-style sources without a parser and reports lines of code,
comment ratio, a cyclomatic-complexity proxy, nesting depth, method and
class sizes, file distributions and dependency manifest facts.
"""

__version__ = "0.1.0"

from .api import analyze
from .config import AnalysisConfig, load_config
from .models import AnalysisReport

__all__ = [
    "analyze",  # Main entry point
    "AnalysisConfig",
    "AnalysisReport",
    "load_config",
]
