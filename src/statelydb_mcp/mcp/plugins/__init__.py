"""
MCP Tool Plugin Architecture.

This package provides the plugin system for the StatelyDB tools: base
classes, the registry and the built-in tool plugins.
"""

from .base import AccountPlugin, MCPToolPlugin, PluginMetadata, SchemaPlugin
from .registry import PluginRegistry, create_default_registry

__all__ = [
    "AccountPlugin",
    "MCPToolPlugin",
    "PluginMetadata",
    "PluginRegistry",
    "SchemaPlugin",
    "create_default_registry",
]
