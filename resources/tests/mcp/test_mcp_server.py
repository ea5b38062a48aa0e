import mcp.types as types
import pytest

from statelydb_mcp.mcp.server import create_mcp_server
from statelydb_mcp.mcp.structured import response_text

EXPECTED_TOOLS = [
    "statelydb-validate-schema",
    "statelydb-validate-migrations",
    "statelydb-attempt-login",
    "statelydb-verify-login",
    "statelydb-schema-put",
    "statelydb-schema-generate",
]


@pytest.fixture
def server(settings, registry):
    return create_mcp_server(settings, registry)


async def list_tools(server) -> list[types.Tool]:
    handler = server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    return result.root.tools


async def call_tool(server, name: str, arguments: dict | None = None) -> types.CallToolResult:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


@pytest.mark.asyncio
async def test_lists_all_tools(server):
    tools = await list_tools(server)

    assert [tool.name for tool in tools] == EXPECTED_TOOLS
    by_name = {tool.name: tool for tool in tools}
    assert by_name["statelydb-validate-schema"].inputSchema["required"] == ["schema"]
    assert by_name["statelydb-schema-put"].inputSchema["required"] == ["schema", "schemaId"]
    assert by_name["statelydb-schema-generate"].inputSchema["properties"]["language"]["enum"] == [
        "typescript", "python", "ruby", "go"
    ]
    assert by_name["statelydb-verify-login"].inputSchema["properties"] == {}


@pytest.mark.asyncio
async def test_call_tool_returns_single_text_block(server, fake_runner, workspace_root):
    fake_runner.on("schema", "validate", stdout="Schema is valid\n")
    await list_tools(server)

    result = await call_tool(server, "statelydb-validate-schema", {"schema": "define X {}"})

    assert result.isError is False
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert response_text(result) == "Schema is valid."
    assert list(workspace_root.iterdir()) == []


@pytest.mark.asyncio
async def test_call_tool_without_arguments(server, fake_runner):
    fake_runner.on("whoami", stdout="Stately UserID: u-1\n")

    result = await call_tool(server, "statelydb-verify-login")

    assert result.isError is False
    assert response_text(result).startswith("You are logged in.")


@pytest.mark.asyncio
async def test_unknown_tool(server, fake_runner):
    result = await call_tool(server, "statelydb-drop-everything", {})

    text = response_text(result)
    assert result.isError is True
    assert text.startswith("Error executing statelydb-drop-everything: Tool 'statelydb-drop-everything' not found")
    assert "Available tools: statelydb-validate-schema" in text
    assert fake_runner.calls == []


@pytest.mark.asyncio
async def test_unexpected_plugin_exception(server, registry, monkeypatch):
    async def explode(arguments):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(registry.get_plugin("statelydb-attempt-login"), "execute", explode)

    result = await call_tool(server, "statelydb-attempt-login", {})

    assert result.isError is True
    assert "An unexpected error occurred in statelydb-attempt-login: kaboom" in response_text(result)
