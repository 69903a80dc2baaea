"""Dependency manifest analysis: Gemfiles, Gemfile variants and gemspecs.

Facts are plain substring checks on the manifest text. When several
manifests of one kind are present, the last one read wins.
"""

import os
from typing import Iterable, Optional

from .exceptions import FileAccessError
from .logging_config import get_logger
from .models import GemfileFacts, GemspecFacts, ManifestAnalysis

logger = get_logger(__name__)

GEMSPEC = "gemspec"
GEMFILE = "gemfile"
GEMFILE_VARIANT = "gemfile_variant"


def manifest_type(path: str) -> Optional[str]:
    """Classify a manifest by basename, or None if it is not one."""
    basename = os.path.basename(path)
    if basename.endswith(".gemspec"):
        return GEMSPEC
    if basename == "Gemfile":
        return GEMFILE
    if basename.startswith("Gemfile."):
        return GEMFILE_VARIANT
    return None


def _read_text(path: str, encoding: str) -> str:
    try:
        with open(path, encoding=encoding, errors="replace") as f:
            return f.read()
    except (OSError, LookupError) as e:
        raise FileAccessError(path, f"Cannot read file: {e}")


def gemspec_facts(content: str) -> GemspecFacts:
    return GemspecFacts(
        has_dependencies="add_dependency" in content or "add_runtime_dependency" in content,
        has_dev_dependencies="add_development_dependency" in content,
        has_version="version" in content,
        has_description="description" in content,
        has_homepage="homepage" in content,
        line_count=len(content.splitlines()),
    )


def gemfile_facts(content: str) -> GemfileFacts:
    lines = content.splitlines()
    return GemfileFacts(
        total_gems=sum(1 for line in lines if line.strip().startswith("gem ")),
        has_source="source " in content,
        has_groups="group " in content,
        has_git_dependencies="git:" in content,
        has_path_dependencies="path:" in content,
        line_count=len(lines),
    )


def analyze_manifests(paths: Iterable[str], encoding: str = "utf-8") -> ManifestAnalysis:
    """Count manifest kinds and extract facts from Gemfiles and gemspecs.

    Unreadable manifests still count towards the type totals; paths that
    are not manifests at all are ignored.
    """
    analysis = ManifestAnalysis()

    for path in paths:
        kind = manifest_type(path)
        if kind is None:
            logger.debug(f"Not a recognised manifest: {path}")
            continue
        analysis.manifest_types[kind] = analysis.manifest_types.get(kind, 0) + 1
        analysis.manifest_count += 1

        if kind == GEMFILE_VARIANT:
            continue
        try:
            content = _read_text(path, encoding)
        except FileAccessError as e:
            logger.warning(f"Could not analyze manifest {path}: {e.reason}")
            continue

        if kind == GEMSPEC:
            analysis.gemspec = gemspec_facts(content)
        else:
            analysis.dependencies = gemfile_facts(content)

    return analysis
