"""Configuration loading and management for source-metrics.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.source-metrics.toml)
    3. Project config (./source-metrics.toml)
    4. Explicit config file
    5. Environment variables (SOURCE_METRICS_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(verbose=True, largest_files_limit=5)
    >>> config.verbosity
    'verbose'
    >>> config.largest_files_limit
    5
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "SOURCE_METRICS_"
CONFIG_FILE_NAME = "source-metrics.toml"

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        Reporting:
            language: Language name reported as the primary language
            largest_files_limit: How many files the largest-files list keeps

        Performance tuning:
            workers: Threads used for per-file passes (1 = sequential)
            parallel_threshold: Minimum file count before threads are used

        Reading:
            encoding: Text encoding used to read sources and manifests

        File discovery (CLI only):
            include_manifests: Collect Gemfiles and gemspecs as manifests
            exclude_patterns: Directory names or relative paths to prune

        Output control:
            verbosity: Logging verbosity level
    """

    language: str = "ruby"
    largest_files_limit: int = 10

    workers: int = 1
    parallel_threshold: int = 10

    encoding: str = "utf-8"

    include_manifests: bool = True
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            ".git",
            "node_modules",
            "vendor/bundle",
            "tmp",
            "log",
            "coverage",
            ".bundle",
        ]
    )

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.language:
            raise ValueError("language must not be empty")
        if self.largest_files_limit < 0:
            raise ValueError("largest_files_limit must be non-negative")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.parallel_threshold < 1:
            raise ValueError("parallel_threshold must be at least 1")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"encoding {self.encoding!r} is not a known codec")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITY_LEVELS)}")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def parallel(self) -> bool:
        return self.workers > 1


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). The
            boolean flags ``verbose`` and ``quiet`` are translated to
            ``verbosity``.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    overrides = dict(overrides)
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(AnalysisConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        return AnalysisConfig(**merged)
    except ValueError as e:
        key = str(e).split(" ", 1)[0]
        raise InvalidConfigError(key, merged.get(key), str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SOURCE_METRICS_* environment variables.

    List fields (exclude_patterns) accept a comma-separated value.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(AnalysisConfig)
    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, accepting either top-level keys or a [source-metrics] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("source-metrics")
    if isinstance(section, dict):
        return section
    return data
