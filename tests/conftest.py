import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def workdir(tmp_path, monkeypatch):
    """Runs the test from an empty temporary directory."""
    monkeypatch.delenv("ZULIP_MARKDOWN_MAX_FILE_SIZE", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
