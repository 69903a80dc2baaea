"""Tests for configuration loading."""

from pathlib import Path

import pytest

from source_metrics.config import AnalysisConfig, load_config
from source_metrics.exceptions import ConfigurationError, InvalidConfigError


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.language == "ruby"
        assert config.largest_files_limit == 10
        assert config.workers == 1
        assert not config.parallel
        assert ".git" in config.exclude_patterns

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"workers": 0},
            {"largest_files_limit": -1},
            {"parallel_threshold": 0},
            {"verbosity": "loud"},
            {"language": ""},
            {"encoding": "no-such-codec"},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            AnalysisConfig(**kwargs)


class TestLoadConfig:
    def test_defaults_without_sources(self, clean_env):
        assert load_config() == AnalysisConfig()

    def test_project_file(self, clean_env):
        (clean_env / "source-metrics.toml").write_text("largest_files_limit = 3\n")
        assert load_config().largest_files_limit == 3

    def test_section_table(self, clean_env, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[source-metrics]\nlanguage = "crystal"\nworkers = 2\n')
        config = load_config(config_file=path)
        assert config.language == "crystal"
        assert config.workers == 2

    def test_env_overrides_file(self, clean_env, monkeypatch):
        (clean_env / "source-metrics.toml").write_text("workers = 2\n")
        monkeypatch.setenv("SOURCE_METRICS_WORKERS", "6")
        monkeypatch.setenv("SOURCE_METRICS_INCLUDE_MANIFESTS", "no")
        monkeypatch.setenv("SOURCE_METRICS_EXCLUDE_PATTERNS", "tmp, vendor")
        config = load_config()
        assert config.workers == 6
        assert config.include_manifests is False
        assert config.exclude_patterns == ["tmp", "vendor"]

    def test_overrides_win(self, clean_env, monkeypatch):
        monkeypatch.setenv("SOURCE_METRICS_WORKERS", "6")
        config = load_config(workers=2, verbose=True)
        assert config.workers == 2
        assert config.verbosity == "verbose"
        assert config.verbose

    def test_quiet_flag(self, clean_env):
        assert load_config(quiet=True).verbosity == "quiet"

    def test_missing_file(self, clean_env):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=Path("nope.toml"))

    def test_invalid_toml(self, clean_env):
        (clean_env / "source-metrics.toml").write_text("workers = = 2\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config()

    def test_unknown_key(self, clean_env):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys: colour"):
            load_config(colour="red")

    def test_invalid_env_value(self, clean_env, monkeypatch):
        monkeypatch.setenv("SOURCE_METRICS_WORKERS", "many")
        with pytest.raises(ConfigurationError, match="SOURCE_METRICS_WORKERS"):
            load_config()

    def test_unknown_encoding(self, clean_env, monkeypatch):
        monkeypatch.setenv("SOURCE_METRICS_ENCODING", "no-such-codec")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "encoding"

    def test_invalid_value(self, clean_env):
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(workers=0)
        assert exc_info.value.key == "workers"
