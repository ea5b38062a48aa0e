"""
Main entry point for the StatelyDB MCP command-line interface.

This module provides the command-line interface for starting the MCP server
and for running the StatelyDB tools directly from a terminal.
"""

import asyncio
import sys
from typing import TextIO

import click

from statelydb_mcp.mcp.plugins.registry import create_default_registry
from statelydb_mcp.mcp.server import run_mcp_server
from statelydb_mcp.mcp.structured import response_text
from statelydb_mcp.services.stately.cli import StatelyCLI
from statelydb_mcp.utils.config import get_settings
from statelydb_mcp.utils.errors import PluginError
from statelydb_mcp.utils.logging import configure_root_logging, setup_logging

logger = setup_logging(__name__)


def _parse_args(pairs: tuple[str, ...]) -> dict[str, str]:
    arguments = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{pair}'", param_hint="--arg")
        arguments[key] = value
    return arguments


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """StatelyDB MCP - schema management tools for AI agents."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    settings = get_settings()
    level = "DEBUG" if verbose or settings.debug else settings.log_level
    configure_root_logging(
        level=level,
        structured=settings.log_structured,
        log_file=settings.get_log_file_path(),
    )


@cli.command()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def mcp(debug: bool) -> None:
    """Start the MCP server on stdio."""
    if debug:
        import logging
        logging.getLogger('statelydb_mcp').setLevel(logging.DEBUG)
        logger.info("Debug logging enabled")

    logger.info("Starting StatelyDB MCP server...")
    try:
        asyncio.run(run_mcp_server(get_settings()))
    except KeyboardInterrupt:
        logger.info("MCP server stopped")


@cli.command()
def tools() -> None:
    """List the available tools."""
    registry = create_default_registry(StatelyCLI(get_settings()))
    for tool in registry.get_tool_definitions():
        required = ", ".join(tool.inputSchema.get("required", [])) or "-"
        click.echo(f"{tool.name}")
        click.echo(f"    {tool.description}")
        click.echo(f"    required arguments: {required}")


@cli.command()
@click.argument('name')
@click.option('--arg', 'args', multiple=True, metavar='KEY=VALUE', help='Tool argument (repeatable)')
@click.option('--schema-file', type=click.File('r', encoding='utf-8'),
              help="Read the 'schema' argument from a file ('-' for stdin)")
def call(name: str, args: tuple[str, ...], schema_file: TextIO | None) -> None:
    """Run a single tool and print its response."""
    arguments = _parse_args(args)
    if schema_file is not None:
        arguments["schema"] = schema_file.read()

    registry = create_default_registry(StatelyCLI(get_settings()))
    try:
        result = asyncio.run(registry.execute_tool(name, arguments))
    except PluginError as e:
        click.echo(f"Error: {e}", err=True)
        for suggestion in e.suggestions:
            click.echo(f"  {suggestion}", err=True)
        sys.exit(2)

    click.echo(response_text(result))
    if result.isError:
        sys.exit(1)


@cli.command()
def check() -> None:
    """Validate the configuration and external programs."""
    settings = get_settings()
    result = settings.validate_settings()

    click.echo(f"stately CLI: {settings.stately_cli}")
    click.echo(f"Go toolchain: {settings.go_cli}")
    click.echo(f"Workspace root: {settings.get_workspace_root()}")
    timeout = settings.get_command_timeout()
    click.echo(f"Command timeout: {f'{timeout:g}s' if timeout else 'none'}")

    for warning in result.warnings:
        click.echo(f"Warning: {warning}")
    for error in result.errors:
        click.echo(f"Error: {error}")

    if not result.valid:
        sys.exit(1)
    click.echo("Configuration OK")


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
