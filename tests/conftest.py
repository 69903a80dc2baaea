"""Shared test fixtures for source-metrics."""

import os

import pytest

SAMPLE_RUBY = """\
# Service object for user signups
module Accounts
  class SignupService
    def initialize(repo)
      @repo = repo
    end

    # Creates the user unless it exists
    def call(params)
      if params[:email] && valid?(params)
        @repo.create(params)
      end
    rescue StandardError
      nil
    end
  end
end
"""


@pytest.fixture
def write_file(tmp_path):
    """Factory writing text (or bytes) to a file under tmp_path; returns its absolute path."""

    def _write(relative: str, content="") -> str:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sample_ruby():
    return SAMPLE_RUBY


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config discovery from the developer's home, cwd and environment."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("SOURCE_METRICS_"):
            monkeypatch.delenv(key)
    return work
