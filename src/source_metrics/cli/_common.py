"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    top: Optional[int] = None,
    no_manifests: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if top is not None:
        overrides["largest_files_limit"] = top
    if no_manifests:
        overrides["include_manifests"] = False
    return load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
