"""Report composer: merges aggregates into an AnalysisReport and its summary."""

from typing import Sequence

from .config import DEFAULT_CONFIG, AnalysisConfig
from .distributions import (
    SourceFile,
    average_file_size,
    count_file_types,
    directory_distribution,
    file_count_by_size,
    file_size_distribution,
    largest_files,
    naming_patterns,
)
from .models import (
    AnalysisReport,
    BasicStats,
    CodeMetrics,
    ComplexityAnalysis,
    CorpusMetrics,
    FileAnalysis,
    ManifestAnalysis,
    Summary,
)


def compose_report(
    source_files: Sequence[SourceFile],
    manifest_files: Sequence[SourceFile],
    corpus: CorpusMetrics,
    manifests: ManifestAnalysis,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> AnalysisReport:
    """Combine already computed pieces into one report.

    File-level distributions cover sources and manifests together; naming
    patterns and size averages cover sources only.
    """
    all_files = list(source_files) + list(manifest_files)

    report = AnalysisReport(
        basic_stats=BasicStats(
            total_files=len(all_files),
            source_files=len(source_files),
            manifest_files=len(manifest_files),
            files_analyzed=corpus.files_analyzed,
            files_skipped=len(corpus.skipped_files),
        ),
        file_analysis=FileAnalysis(
            file_types=count_file_types(all_files),
            largest_files=largest_files(all_files, config.largest_files_limit),
            directory_distribution=directory_distribution(all_files),
            file_size_distribution=file_size_distribution(all_files),
            naming_patterns=naming_patterns(source_files),
        ),
        code_metrics=CodeMetrics(
            lines_of_code=corpus.lines_of_code,
            average_file_size=average_file_size(source_files),
            file_count_by_size=file_count_by_size(source_files),
            method_density=corpus.method_density,
            class_distribution=corpus.class_distribution,
        ),
        complexity_analysis=ComplexityAnalysis(
            cyclomatic_complexity=corpus.complexity,
            nesting_depth=corpus.nesting,
            method_length_distribution=corpus.method_lengths,
            class_size_distribution=corpus.class_sizes,
        ),
        manifest_analysis=manifests,
        skipped_files=list(corpus.skipped_files),
    )
    report.summary = build_summary(report, config)
    return report


def build_summary(report: AnalysisReport, config: AnalysisConfig = DEFAULT_CONFIG) -> Summary:
    """Pick representative values out of a composed report."""
    file_types = report.file_analysis.file_types
    directories = report.file_analysis.directory_distribution
    loc = report.code_metrics.lines_of_code
    classes = report.code_metrics.class_distribution

    return Summary(
        total_files=report.basic_stats.total_files,
        primary_language=config.language.capitalize(),
        lines_of_code=loc.code_lines,
        total_lines=loc.total_lines,
        comment_ratio=loc.comment_ratio,
        average_file_size=report.code_metrics.average_file_size.human_readable,
        most_common_extension=max(file_types, key=file_types.get) if file_types else None,
        largest_directory=next(iter(directories), None),
        total_methods=report.code_metrics.method_density.total_methods,
        total_classes=classes.total_classes,
        total_modules=classes.total_modules,
        manifest_count=report.manifest_analysis.manifest_count,
        complexity_score=report.complexity_analysis.cyclomatic_complexity.average_complexity,
        files_analyzed=report.basic_stats.files_analyzed,
        files_skipped=report.basic_stats.files_skipped,
    )
