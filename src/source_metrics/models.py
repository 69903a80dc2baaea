"""Report data models.

All values are plain numbers, strings, lists and dicts so that
``dataclasses.asdict`` turns a report into a JSON-ready mapping.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from .scanning.scanner import SkippedFile


@dataclass
class LocStats:
    total_lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    blank_lines: int = 0
    comment_ratio: float = 0.0


@dataclass
class ComplexityStats:
    total_complexity: int = 0
    average_complexity: float = 0.0
    files_analyzed: int = 0


@dataclass
class NestingStats:
    max_nesting_depth: int = 0
    average_nesting_depth: float = 0.0
    files_analyzed: int = 0


@dataclass
class MethodDensity:
    """Method declarations against lines; average length uses closed methods only."""

    total_methods: int = 0
    total_lines: int = 0
    methods_per_line: float = 0.0
    average_method_length: float = 0.0


@dataclass
class ClassDistribution:
    total_classes: int = 0
    total_modules: int = 0
    classes_per_file: float = 0.0
    modules_per_file: float = 0.0


@dataclass
class LengthDistribution:
    """Summary of block lengths; ``median`` is the upper median."""

    count: int = 0
    average: float = 0.0
    minimum: int = 0
    maximum: int = 0
    median: int = 0


@dataclass
class FileSizeStats:
    bytes: float = 0.0
    kb: float = 0.0
    human_readable: str = "0.0 B"


@dataclass
class LargeFile:
    path: str
    size: int
    size_kb: float


@dataclass
class NamingPatterns:
    snake_case: int = 0
    camel_case: int = 0
    mixed_case: int = 0
    with_numbers: int = 0
    test_files: int = 0
    spec_files: int = 0


@dataclass
class SizeDistribution:
    tiny: int = 0
    small: int = 0
    medium: int = 0
    large: int = 0
    huge: int = 0


@dataclass
class SizeCategories:
    """Coarser size grouping where ``large`` covers everything from 100 KiB."""

    tiny: int = 0
    small: int = 0
    medium: int = 0
    large: int = 0


@dataclass
class CorpusMetrics:
    """Folded per-file metrics for a whole corpus."""

    lines_of_code: LocStats = field(default_factory=LocStats)
    complexity: ComplexityStats = field(default_factory=ComplexityStats)
    nesting: NestingStats = field(default_factory=NestingStats)
    method_density: MethodDensity = field(default_factory=MethodDensity)
    class_distribution: ClassDistribution = field(default_factory=ClassDistribution)
    method_lengths: LengthDistribution = field(default_factory=LengthDistribution)
    class_sizes: LengthDistribution = field(default_factory=LengthDistribution)
    files_analyzed: int = 0
    skipped_files: list[SkippedFile] = field(default_factory=list)


@dataclass
class BasicStats:
    total_files: int = 0
    source_files: int = 0
    manifest_files: int = 0
    files_analyzed: int = 0
    files_skipped: int = 0


@dataclass
class FileAnalysis:
    file_types: dict[str, int] = field(default_factory=dict)
    largest_files: list[LargeFile] = field(default_factory=list)
    directory_distribution: dict[str, int] = field(default_factory=dict)
    file_size_distribution: SizeDistribution = field(default_factory=SizeDistribution)
    naming_patterns: NamingPatterns = field(default_factory=NamingPatterns)


@dataclass
class CodeMetrics:
    lines_of_code: LocStats = field(default_factory=LocStats)
    average_file_size: FileSizeStats = field(default_factory=FileSizeStats)
    file_count_by_size: SizeCategories = field(default_factory=SizeCategories)
    method_density: MethodDensity = field(default_factory=MethodDensity)
    class_distribution: ClassDistribution = field(default_factory=ClassDistribution)


@dataclass
class ComplexityAnalysis:
    cyclomatic_complexity: ComplexityStats = field(default_factory=ComplexityStats)
    nesting_depth: NestingStats = field(default_factory=NestingStats)
    method_length_distribution: LengthDistribution = field(default_factory=LengthDistribution)
    class_size_distribution: LengthDistribution = field(default_factory=LengthDistribution)


@dataclass
class GemspecFacts:
    has_dependencies: bool = False
    has_dev_dependencies: bool = False
    has_version: bool = False
    has_description: bool = False
    has_homepage: bool = False
    line_count: int = 0


@dataclass
class GemfileFacts:
    total_gems: int = 0
    has_source: bool = False
    has_groups: bool = False
    has_git_dependencies: bool = False
    has_path_dependencies: bool = False
    line_count: int = 0


@dataclass
class ManifestAnalysis:
    manifest_count: int = 0
    manifest_types: dict[str, int] = field(default_factory=dict)
    dependencies: Optional[GemfileFacts] = None
    gemspec: Optional[GemspecFacts] = None


@dataclass
class Summary:
    total_files: int = 0
    primary_language: str = ""
    lines_of_code: int = 0
    total_lines: int = 0
    comment_ratio: float = 0.0
    average_file_size: str = "0.0 B"
    most_common_extension: Optional[str] = None
    largest_directory: Optional[str] = None
    total_methods: int = 0
    total_classes: int = 0
    total_modules: int = 0
    manifest_count: int = 0
    complexity_score: float = 0.0
    files_analyzed: int = 0
    files_skipped: int = 0


@dataclass
class AnalysisReport:
    """Root aggregate of one analysis call."""

    basic_stats: BasicStats = field(default_factory=BasicStats)
    file_analysis: FileAnalysis = field(default_factory=FileAnalysis)
    code_metrics: CodeMetrics = field(default_factory=CodeMetrics)
    complexity_analysis: ComplexityAnalysis = field(default_factory=ComplexityAnalysis)
    manifest_analysis: ManifestAnalysis = field(default_factory=ManifestAnalysis)
    summary: Summary = field(default_factory=Summary)
    skipped_files: list[SkippedFile] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
