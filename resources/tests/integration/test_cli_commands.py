import pytest
from click.testing import CliRunner

import statelydb_mcp.main as main_module
from statelydb_mcp.main import cli
from statelydb_mcp.mcp.plugins.registry import create_default_registry


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def wire_cli(monkeypatch, settings, stately_cli):
    """Point the command group at the test settings and the fake runner."""
    monkeypatch.setattr(main_module, "configure_root_logging", lambda **kwargs: None)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "create_default_registry", lambda cli=None: create_default_registry(stately_cli))


def test_tools_lists_every_tool(runner):
    result = runner.invoke(cli, ["tools"])

    assert result.exit_code == 0, result.output
    assert "statelydb-validate-schema" in result.stdout
    assert "statelydb-schema-generate" in result.stdout
    assert "required arguments: schemaId, language" in result.stdout
    assert "required arguments: -" in result.stdout


def test_call_validate_schema_from_file(runner, fake_runner, tmp_path):
    fake_runner.on("schema", "validate", stdout="Schema is valid\n")
    schema_file = tmp_path / "schema.ts"
    schema_file.write_text("define X {}", encoding="utf-8")

    result = runner.invoke(cli, ["call", "statelydb-validate-schema", "--schema-file", str(schema_file)])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "Schema is valid."


def test_call_with_key_value_arguments(runner, fake_runner):
    fake_runner.on("schema", "generate", files={"index.ts": "export {};"})

    result = runner.invoke(cli, [
        "call", "statelydb-schema-generate",
        "--arg", "schemaId=12",
        "--arg", "language=typescript",
    ])

    assert result.exit_code == 0, result.output
    assert "File: index.ts" in result.stdout
    assert fake_runner.args_of("schema", "generate")[0][:6] == ["schema", "generate", "-s", "12", "-l", "typescript"]


def test_call_error_response_exits_nonzero(runner, fake_runner):
    fake_runner.on("whoami", stdout="nobody")

    result = runner.invoke(cli, ["call", "statelydb-verify-login"])

    assert result.exit_code == 1
    assert "You are not logged in." in result.stdout


def test_call_unknown_tool(runner):
    result = runner.invoke(cli, ["call", "statelydb-nope"])

    assert result.exit_code == 2
    assert "Tool 'statelydb-nope' not found" in result.output


def test_call_rejects_malformed_argument(runner, fake_runner):
    result = runner.invoke(cli, ["call", "statelydb-schema-put", "--arg", "schemaId"])

    assert result.exit_code == 2
    assert "expected key=value" in result.output
    assert fake_runner.calls == []


def test_check_reports_configuration(runner, monkeypatch, workspace_root):
    monkeypatch.setattr("statelydb_mcp.utils.config.shutil.which", lambda name: f"/usr/bin/{name}")

    result = runner.invoke(cli, ["check"])

    assert result.exit_code == 0, result.output
    assert f"Workspace root: {workspace_root.resolve()}" in result.stdout
    assert "Command timeout: 30s" in result.stdout
    assert "Configuration OK" in result.stdout


def test_check_fails_for_missing_workspace_root(runner, monkeypatch, settings, tmp_path):
    monkeypatch.setattr("statelydb_mcp.utils.config.shutil.which", lambda name: f"/usr/bin/{name}")
    settings.workspace_root = str(tmp_path / "does-not-exist")

    result = runner.invoke(cli, ["check"])

    assert result.exit_code == 1
    assert "Error:" in result.stdout
    assert "Configuration OK" not in result.stdout
