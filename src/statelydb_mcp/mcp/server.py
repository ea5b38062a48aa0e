"""
MCP server implementation for StatelyDB.

This module implements the Model Context Protocol server that exposes the
StatelyDB schema tools to MCP clients over stdio.
"""

import asyncio
import uuid

import mcp.server.stdio
from mcp import types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from statelydb_mcp.mcp.plugins.registry import PluginRegistry, create_default_registry
from statelydb_mcp.mcp.structured import error_response
from statelydb_mcp.services.stately.cli import StatelyCLI
from statelydb_mcp.utils.config import StatelyMCPSettings, get_settings
from statelydb_mcp.utils.errors import PluginError, StatelyMCPError
from statelydb_mcp.utils.logging import configure_root_logging, setup_logging

logger = setup_logging(__name__)


def _with_suggestions(text: str, suggestions: list[str]) -> str:
    if suggestions:
        text += "\n\nTroubleshooting Steps:"
        for i, suggestion in enumerate(suggestions, 1):
            text += f"\n   {i}. {suggestion}"
    return text


def create_mcp_server(
    settings: StatelyMCPSettings | None = None,
    registry: PluginRegistry | None = None
) -> Server:
    """Create and configure the MCP server.

    Args:
        settings: Optional settings override
        registry: Optional plugin registry (defaults to all built-in tools)

    Returns:
        Configured MCP server instance
    """
    settings = settings or get_settings()
    server = Server(settings.mcp_server_name)

    if registry is None:
        registry = create_default_registry(StatelyCLI(settings))
    logger.info(f"MCP server '{settings.mcp_server_name}' using {len(registry.list_plugins())} tools")

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available MCP tools from plugin registry."""
        corr = str(uuid.uuid4())
        tools = registry.get_tool_definitions()
        logger.info(f"[corr={corr}] list_tools returning {len(tools)} tools")
        return tools

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
        """Handle tool execution requests via plugin registry."""
        corr = str(uuid.uuid4())
        logger.info(f"[corr={corr}] call_tool start: name={name}")

        try:
            result = await registry.execute_tool(name, arguments or {})
            logger.info(f"[corr={corr}] call_tool done: name={name}, is_error={result.isError}")
            return result
        except PluginError as e:
            logger.error(f"[corr={corr}] Plugin error in {name}: {e}")
            return error_response(_with_suggestions(f"Error executing {name}: {e!s}", e.suggestions))
        except StatelyMCPError as e:
            logger.error(f"[corr={corr}] Internal error in {name}: {e}")
            text = _with_suggestions(f"Internal error in {name}: {e!s}", e.suggestions)
            return error_response(f"{text}\n\nError Code: {e.error_code}")
        except Exception as e:
            logger.exception(f"[corr={corr}] Unexpected error in tool {name}: {e}")
            return error_response(_with_suggestions(
                f"An unexpected error occurred in {name}: {e!s}",
                [
                    "Try the operation again in a moment",
                    "Check that the stately CLI is installed and on your PATH",
                    "Check the server logs for additional error details",
                ],
            ))

    return server


async def run_mcp_server(settings: StatelyMCPSettings | None = None) -> None:
    """Run the MCP server with stdio transport.

    Args:
        settings: Optional settings override
    """
    settings = settings or get_settings()

    validation = settings.validate_settings()
    for warning in validation.warnings:
        logger.warning(warning)
    for error in validation.errors:
        logger.error(error)

    server = create_mcp_server(settings)

    try:
        logger.info("Starting MCP server with stdio transport")
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=settings.mcp_server_name,
                    server_version=settings.mcp_server_version,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received - shutting down")
        raise
    except Exception as e:
        logger.exception(f"MCP server error: {e}")
        raise
    finally:
        logger.info("MCP server shutdown complete")


def main() -> None:
    """Main entry point for the stdio MCP server."""
    settings = get_settings()
    configure_root_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        structured=settings.log_structured,
        log_file=settings.get_log_file_path(),
    )

    try:
        asyncio.run(run_mcp_server(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
