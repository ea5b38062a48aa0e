"""
Base classes for MCP Tool Plugins.

This module defines the abstract base classes for MCP tool plugins. Each
StatelyDB operation is one plugin: a name, a description, an input schema
and an async ``execute`` returning the response envelope.
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from mcp import types

from statelydb_mcp.services.stately.cli import StatelyCLI
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


@dataclass
class PluginMetadata:
    """Metadata for MCP tool plugins."""

    name: str
    version: str
    description: str
    author: str | None = None
    tags: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "author": self.author,
            "tags": self.tags or []
        }


class MCPToolPlugin(ABC):
    """Abstract base class for all MCP tool plugins."""

    def __init__(self, cli: StatelyCLI | None = None):
        """Initialize the plugin.

        Args:
            cli: Optional stately CLI service; a default one is created on first use
        """
        self._cli = cli
        self._metadata: PluginMetadata | None = None
        self._validated = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the unique name of this plugin."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get a human-readable description of this plugin."""
        pass

    @property
    def version(self) -> str:
        """Get the version of this plugin."""
        return "1.0.0"

    @property
    def cli(self) -> StatelyCLI:
        """Get the stately CLI service used by this plugin."""
        if self._cli is None:
            self._cli = StatelyCLI()
        return self._cli

    @property
    def metadata(self) -> PluginMetadata:
        """Get plugin metadata."""
        if self._metadata is None:
            self._metadata = PluginMetadata(
                name=self.name,
                version=self.version,
                description=self.description,
                author=getattr(self, 'author', None),
                tags=getattr(self, 'tags', None)
            )
        return self._metadata

    @abstractmethod
    def get_input_schema(self) -> dict[str, Any]:
        """Get the JSON schema of this tool's arguments."""
        pass

    def get_tool_definition(self) -> types.Tool:
        """Get the MCP tool definition for this plugin."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.get_input_schema()
        )

    @abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute the plugin with the given arguments.

        Implementations convert every failure into an error envelope.

        Args:
            arguments: Dictionary of arguments passed to the tool

        Returns:
            Response envelope with one text block
        """
        pass

    def validate(self) -> bool:
        """Validate that the plugin is properly configured.

        Returns:
            True if plugin is valid, False otherwise
        """
        try:
            if not self.name or not isinstance(self.name, str):
                logger.error(f"Plugin {self.__class__.__name__} has invalid name")
                return False

            if not self.description or not isinstance(self.description, str):
                logger.error(f"Plugin {self.name} has invalid description")
                return False

            tool_def = self.get_tool_definition()
            if not isinstance(tool_def, types.Tool):
                logger.error(f"Plugin {self.name} has invalid tool definition")
                return False

            sig = inspect.signature(self.execute)
            if len(sig.parameters) != 1:
                logger.error(f"Plugin {self.name} execute method has wrong signature")
                return False

            self._validated = True
            logger.debug(f"Plugin {self.name} validation passed")
            return True

        except Exception as e:
            logger.error(f"Plugin {self.name} validation failed: {e}")
            return False

    @property
    def is_validated(self) -> bool:
        """Check if plugin has been validated."""
        return self._validated

    def on_load(self) -> None:
        """Called when the plugin is loaded into the registry."""
        logger.debug(f"Plugin {self.name} loaded")

    def on_unload(self) -> None:
        """Called when the plugin is unloaded from the registry."""
        logger.debug(f"Plugin {self.name} unloaded")

    def __repr__(self) -> str:
        """String representation of the plugin."""
        return f"<{self.__class__.__name__}: {self.name} v{self.version}>"


class SchemaPlugin(MCPToolPlugin):
    """Base class for plugins operating on a schema definition."""

    author = "StatelyDB MCP"

    @property
    def tags(self) -> list[str]:
        """Default tags for schema plugins."""
        return ["schema", "stately"]


class AccountPlugin(MCPToolPlugin):
    """Base class for login and identity plugins."""

    author = "StatelyDB MCP"

    @property
    def tags(self) -> list[str]:
        """Default tags for account plugins."""
        return ["auth", "stately"]
