"""Pytest configuration for resources/tests.

Ensures the repository root is on sys.path so tests can import
helpers via absolute package path like `resources.tests.helpers`.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from resources.tests.helpers.fake_runner import FakeRunner  # noqa: E402
from statelydb_mcp.mcp.plugins.registry import create_default_registry  # noqa: E402
from statelydb_mcp.services.stately.cli import StatelyCLI  # noqa: E402
from statelydb_mcp.utils.config import StatelyMCPSettings  # noqa: E402


@pytest.fixture
def workspace_root(tmp_path):
    root = tmp_path / "workspaces"
    root.mkdir()
    return root


@pytest.fixture
def settings(workspace_root):
    return StatelyMCPSettings(
        _env_file=None,
        workspace_root=str(workspace_root),
        command_timeout_seconds=30,
    )


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def stately_cli(settings, fake_runner):
    return StatelyCLI(settings, runner=fake_runner)


@pytest.fixture
def registry(stately_cli):
    return create_default_registry(stately_cli)
