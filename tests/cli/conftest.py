"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from tskquery.cli.main import cli


@pytest.fixture
def invoke(tmp_path, monkeypatch):
    """Return a function that runs the CLI with logs kept under tmp_path."""
    monkeypatch.setenv("TSKQUERY_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("TSKQUERY_TZ", raising=False)
    monkeypatch.delenv("TSKQUERY_DEBUG", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    runner = CliRunner()

    def _invoke(*args: str, **kwargs):
        return runner.invoke(cli, list(args), **kwargs)

    return _invoke
