"""File discovery for the CLI: collect source files and manifests under a root.

The analysis core never walks directories; it receives the lists built here.
"""

import fnmatch
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..logging_config import get_logger
from ..manifests import manifest_type

logger = get_logger(__name__)

SOURCE_EXTENSIONS = (".rb", ".rake", ".gemspec")


@dataclass
class DiscoveredFiles:
    source_files: list[str] = field(default_factory=list)
    manifest_files: list[str] = field(default_factory=list)

    def extend(self, other: "DiscoveredFiles") -> None:
        self.source_files.extend(other.source_files)
        self.manifest_files.extend(other.manifest_files)


def has_ruby_shebang(path: str) -> bool:
    """True for a non-empty executable whose first line mentions ruby."""
    try:
        if not os.access(path, os.X_OK) or os.path.getsize(path) == 0:
            return False
        with open(path, encoding="utf-8", errors="replace") as f:
            first_line = f.readline().strip()
    except OSError:
        return False
    return "ruby" in first_line


def is_source_file(path: str) -> bool:
    return path.endswith(SOURCE_EXTENSIONS) or has_ruby_shebang(path)


def is_manifest_file(path: str) -> bool:
    return manifest_type(path) is not None


def is_excluded(relative_dir: str, patterns: Sequence[str]) -> bool:
    """Match a directory's name or root-relative path against exclude globs."""
    name = os.path.basename(relative_dir)
    return any(
        fnmatch.fnmatch(name, pattern) or fnmatch.fnmatch(relative_dir, pattern)
        for pattern in patterns
    )


def discover(root: Path, config: AnalysisConfig = DEFAULT_CONFIG) -> DiscoveredFiles:
    """Walk ``root`` and return sorted absolute source and manifest paths.

    A single file path is accepted as well and classified on its own.
    """
    root = root.resolve()
    if root.is_file():
        return _classify([str(root)], config)

    candidates: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        kept = []
        for dirname in dirnames:
            relative = Path(dirpath, dirname).relative_to(root).as_posix()
            if is_excluded(relative, config.exclude_patterns):
                logger.debug(f"Pruning {relative}")
                continue
            kept.append(dirname)
        dirnames[:] = kept
        candidates.extend(os.path.join(dirpath, name) for name in filenames)

    return _classify(candidates, config)


def _classify(paths: Sequence[str], config: AnalysisConfig) -> DiscoveredFiles:
    found = DiscoveredFiles()
    for path in paths:
        if is_source_file(path):
            found.source_files.append(path)
        if config.include_manifests and is_manifest_file(path):
            found.manifest_files.append(path)
    found.source_files.sort()
    found.manifest_files.sort()
    return found
