from __future__ import annotations

import sys
from pathlib import Path

import pytest
import respx
from typer.testing import CliRunner

# Make the ``src`` layout importable when the package is not installed.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep every test away from the real ``~/.harness-cli``."""

    home = tmp_path / "harness-home"
    monkeypatch.setenv("HARNESS_CLI_HOME", str(home))
    for name in (
        "HARNESS_API_KEY",
        "HARNESS_ACCOUNT_ID",
        "HARNESS_ORG_ID",
        "HARNESS_BASE_URL",
        "HARNESS_TIMEOUT",
        "HARNESS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture
def cli_runner(monkeypatch):
    """Provide a CLI runner with a dummy API key and account."""

    monkeypatch.setenv("HARNESS_API_KEY", "pat.test-key")
    monkeypatch.setenv("HARNESS_ACCOUNT_ID", "ACCOUNT")
    return CliRunner()
