"""Public API: analyze a corpus of source files.

Example:
    >>> from source_metrics import analyze
    >>> report = analyze(["/repo/lib/app.rb"], ["/repo/Gemfile"])
    >>> report.summary.total_methods
    3
"""

import threading
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, AnalysisConfig
from .distributions import stat_files
from .logging_config import get_logger
from .manifests import analyze_manifests
from .metrics.aggregator import MetricsAggregator
from .models import AnalysisReport
from .report import compose_report

logger = get_logger(__name__)


def analyze(
    source_files: Iterable[str],
    manifest_files: Iterable[str] = (),
    config: Optional[AnalysisConfig] = None,
    cancel: Optional[threading.Event] = None,
) -> AnalysisReport:
    """Build an AnalysisReport for already discovered files.

    Args:
        source_files: Absolute paths of source files, in a stable order
        manifest_files: Absolute paths of dependency manifests
        config: Analysis configuration (defaults apply when omitted)
        cancel: Optional event; once set, no further files are scanned

    Returns:
        The composed report. Files that could not be read appear in
        ``report.skipped_files`` and are excluded from every
        ``files_analyzed`` count.
    """
    config = config or DEFAULT_CONFIG
    sources = list(source_files)
    manifests = list(manifest_files)

    logger.debug(f"Analyzing {len(sources)} source files and {len(manifests)} manifests")

    corpus = MetricsAggregator(config).run(sources, cancel=cancel)
    manifest_analysis = analyze_manifests(manifests, encoding=config.encoding)

    return compose_report(
        source_files=stat_files(sources),
        manifest_files=stat_files(manifests),
        corpus=corpus,
        manifests=manifest_analysis,
        config=config,
    )
