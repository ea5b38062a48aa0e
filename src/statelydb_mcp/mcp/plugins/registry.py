"""
Plugin Registry for MCP Tool Plugins.

This module provides the central registry for managing MCP tool plugins,
including registration, validation, argument checking and execution.
"""

from collections import defaultdict
from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import MCPToolPlugin, PluginMetadata
from statelydb_mcp.mcp.schemas.validator import SchemaValidator
from statelydb_mcp.mcp.structured import error_response
from statelydb_mcp.services.stately.cli import StatelyCLI
from statelydb_mcp.utils.errors import PluginError
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class PluginRegistry:
    """Central registry for MCP tool plugins."""

    def __init__(self, cli: StatelyCLI | None = None):
        """Initialize the plugin registry.

        Args:
            cli: Optional stately CLI service shared by all plugins
        """
        self.cli = cli
        self._plugins: dict[str, MCPToolPlugin] = {}
        self._tags: dict[str, set[str]] = defaultdict(set)
        self._validator = SchemaValidator()

        logger.info("Plugin registry initialized")

    def register_plugin_class(self, plugin_class: type[MCPToolPlugin]) -> bool:
        """Instantiate and register a plugin class.

        Args:
            plugin_class: Plugin class to register

        Returns:
            True if registration successful, False otherwise
        """
        try:
            return self.register_plugin_instance(plugin_class(self.cli))
        except Exception as e:
            logger.error(f"Failed to register plugin class {plugin_class.__name__}: {e}")
            return False

    def register_plugin_instance(self, plugin: MCPToolPlugin) -> bool:
        """Register a plugin instance directly.

        Args:
            plugin: Plugin instance to register

        Returns:
            True if registration successful, False otherwise
        """
        if not plugin.validate():
            logger.error(f"Plugin {plugin!r} failed validation")
            return False

        schema_check = self._validator.validate_schema(plugin.get_input_schema())
        if not schema_check.is_valid:
            logger.error(f"Plugin {plugin.name} has an invalid input schema: {schema_check.error_messages()}")
            return False

        if plugin.name in self._plugins:
            logger.warning(f"Plugin {plugin.name} already registered, overwriting")
            self.unregister_plugin(plugin.name)

        self._plugins[plugin.name] = plugin
        for tag in plugin.metadata.tags or []:
            self._tags[tag].add(plugin.name)

        plugin.on_load()
        logger.info(f"Registered plugin: {plugin.name}")
        return True

    def register_plugins(self, plugin_classes: list[type[MCPToolPlugin]]) -> dict[str, bool]:
        """Register several plugin classes.

        Returns:
            Dictionary mapping class names to registration success
        """
        results = {cls.__name__: self.register_plugin_class(cls) for cls in plugin_classes}
        logger.info(f"Registered {sum(results.values())}/{len(results)} plugins")
        return results

    def unregister_plugin(self, plugin_name: str) -> bool:
        """Unregister a plugin.

        Returns:
            True if the plugin was registered
        """
        plugin = self._plugins.pop(plugin_name, None)
        if plugin is None:
            return False

        plugin.on_unload()
        for names in self._tags.values():
            names.discard(plugin_name)

        logger.info(f"Unregistered plugin: {plugin_name}")
        return True

    def get_plugin(self, plugin_name: str) -> MCPToolPlugin | None:
        """Get a plugin instance by name."""
        return self._plugins.get(plugin_name)

    def list_plugins(self) -> list[str]:
        """List all registered plugin names in registration order."""
        return list(self._plugins)

    def get_plugins_by_tag(self, tag: str) -> list[MCPToolPlugin]:
        """Get all plugins with a specific tag."""
        return [self._plugins[name] for name in self.list_plugins() if name in self._tags.get(tag, set())]

    def get_plugin_metadata(self, plugin_name: str) -> PluginMetadata | None:
        """Get metadata for a plugin."""
        plugin = self._plugins.get(plugin_name)
        return plugin.metadata if plugin else None

    def get_tool_definitions(self) -> list[types.Tool]:
        """Get MCP tool definitions for all registered plugins."""
        tools = []

        for plugin_name, plugin in self._plugins.items():
            try:
                tools.append(plugin.get_tool_definition())
            except Exception as e:
                logger.error(f"Failed to get tool definition for {plugin_name}: {e}")

        return tools

    async def execute_tool(self, tool_name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute a tool by name.

        Arguments are checked against the tool's input schema first; invalid
        arguments produce an error envelope without running the tool.

        Args:
            tool_name: Name of the tool to execute
            arguments: Arguments to pass to the tool

        Returns:
            Response envelope

        Raises:
            PluginError: If the tool is not registered
        """
        plugin = self.get_plugin(tool_name)
        if plugin is None:
            raise PluginError(
                f"Tool '{tool_name}' not found",
                suggestions=[f"Available tools: {', '.join(self.list_plugins())}"]
            )

        check = self._validator.validate_data(arguments, plugin.get_input_schema())
        if not check.is_valid:
            messages = "; ".join(check.error_messages())
            logger.warning(f"Invalid arguments for {tool_name}: {messages}")
            return error_response(f"Invalid arguments for {tool_name}: {messages}")

        logger.debug(f"Executing tool {tool_name}")
        return await plugin.execute(arguments)

    def get_registry_info(self) -> dict[str, Any]:
        """Get information about the plugin registry."""
        return {
            "total_plugins": len(self._plugins),
            "plugins": self.list_plugins(),
            "tags": {tag: sorted(names) for tag, names in self._tags.items() if names},
            "metadata": {name: plugin.metadata.to_dict() for name, plugin in self._plugins.items()}
        }


def create_default_registry(cli: StatelyCLI | None = None) -> PluginRegistry:
    """Create a registry with all built-in StatelyDB tools registered."""
    from statelydb_mcp.mcp.plugins.tools import get_builtin_plugins

    registry = PluginRegistry(cli or StatelyCLI())
    registry.register_plugins(get_builtin_plugins())
    return registry
