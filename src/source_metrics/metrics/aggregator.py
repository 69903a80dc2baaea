"""Metrics aggregator: per-file passes folded into corpus-wide totals.

Each file is measured independently. Results are collected in input order
and folded only after every pass has finished, so corpus ratios and
averages are computed once over the complete set of analyzed files.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..logging_config import get_logger
from ..models import (
    ClassDistribution,
    ComplexityStats,
    CorpusMetrics,
    LocStats,
    MethodDensity,
    NestingStats,
)
from ..scanning.scanner import FileScanner, SkippedFile
from .file_metrics import FileMetrics, measure_lines
from .statistics import length_distribution, percentage, safe_ratio

logger = get_logger(__name__)


class MetricsAggregator:
    """Runs the per-file pass over a corpus and folds the results."""

    def __init__(self, config: AnalysisConfig = DEFAULT_CONFIG):
        self.config = config

    def measure(self, path: str) -> tuple[Optional[FileMetrics], Optional[SkippedFile]]:
        """Measure one file; exactly one element of the result is set."""
        scanner = FileScanner(encoding=self.config.encoding)
        scanned = scanner.scan(path)
        if scanned.skipped:
            return None, scanner.skipped[0]
        return measure_lines(path, scanned.lines), None

    def collect(
        self,
        paths: Sequence[str],
        cancel: Optional[threading.Event] = None,
    ) -> tuple[list[FileMetrics], list[SkippedFile]]:
        """Measure every path, in input order, until ``cancel`` is set."""
        if self.config.parallel and len(paths) >= self.config.parallel_threshold:
            outcomes = self._collect_parallel(paths, cancel)
        else:
            outcomes = self._collect_sequential(paths, cancel)

        measured = [m for m, _ in outcomes if m is not None]
        skipped = [s for _, s in outcomes if s is not None]
        return measured, skipped

    def run(
        self,
        paths: Sequence[str],
        cancel: Optional[threading.Event] = None,
    ) -> CorpusMetrics:
        measured, skipped = self.collect(paths, cancel)
        if skipped:
            logger.info(f"Analyzed {len(measured)} of {len(paths)} files, {len(skipped)} skipped")
        corpus = fold(measured)
        corpus.skipped_files = skipped
        return corpus

    def _collect_sequential(self, paths, cancel):
        outcomes = []
        for path in paths:
            if cancel is not None and cancel.is_set():
                logger.debug(f"Cancelled after {len(outcomes)} of {len(paths)} files")
                break
            outcomes.append(self.measure(path))
        return outcomes

    def _collect_parallel(self, paths, cancel):
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = []
            for path in paths:
                if cancel is not None and cancel.is_set():
                    logger.debug(f"Cancelled after enqueuing {len(futures)} of {len(paths)} files")
                    break
                futures.append(executor.submit(self.measure, path))
            return [future.result() for future in futures]


def fold(files: Iterable[FileMetrics]) -> CorpusMetrics:
    """Fold per-file metrics into corpus totals.

    Every average divides by the number of files actually measured and is
    0 when there are none.
    """
    files = list(files)
    count = len(files)

    total_lines = sum(f.total_lines for f in files)
    comment_lines = sum(f.comment_lines for f in files)
    loc = LocStats(
        total_lines=total_lines,
        code_lines=sum(f.code_lines for f in files),
        comment_lines=comment_lines,
        blank_lines=sum(f.blank_lines for f in files),
        comment_ratio=percentage(comment_lines, total_lines),
    )

    total_complexity = sum(f.complexity for f in files)
    complexity = ComplexityStats(
        total_complexity=total_complexity,
        average_complexity=safe_ratio(total_complexity, count),
        files_analyzed=count,
    )

    depths = [f.max_nesting_depth for f in files]
    nesting = NestingStats(
        max_nesting_depth=max(depths, default=0),
        average_nesting_depth=safe_ratio(sum(depths), count),
        files_analyzed=count,
    )

    method_lengths = [n for f in files for n in f.method_lengths]
    class_sizes = [n for f in files for n in f.class_sizes]
    method_distribution = length_distribution(method_lengths)

    total_methods = sum(f.method_declarations for f in files)
    density = MethodDensity(
        total_methods=total_methods,
        total_lines=total_lines,
        methods_per_line=percentage(total_methods, total_lines, digits=4),
        average_method_length=method_distribution.average,
    )

    total_classes = sum(f.class_declarations for f in files)
    total_modules = sum(f.module_declarations for f in files)
    classes = ClassDistribution(
        total_classes=total_classes,
        total_modules=total_modules,
        classes_per_file=safe_ratio(total_classes, count),
        modules_per_file=safe_ratio(total_modules, count),
    )

    return CorpusMetrics(
        lines_of_code=loc,
        complexity=complexity,
        nesting=nesting,
        method_density=density,
        class_distribution=classes,
        method_lengths=method_distribution,
        class_sizes=length_distribution(class_sizes),
        files_analyzed=count,
    )
