"""
Built-in MCP Tool Plugins.

This package contains one plugin per StatelyDB operation.
"""

from statelydb_mcp.mcp.plugins.base import MCPToolPlugin

from .attempt_login import AttemptLoginPlugin
from .schema_generate import SchemaGeneratePlugin
from .schema_put import SchemaPutPlugin
from .validate_migrations import ValidateMigrationsPlugin
from .validate_schema import ValidateSchemaPlugin
from .verify_login import VerifyLoginPlugin


def get_builtin_plugins() -> list[type[MCPToolPlugin]]:
    """Get all built-in plugin classes.

    Returns:
        List of built-in plugin classes
    """
    return [
        ValidateSchemaPlugin,
        ValidateMigrationsPlugin,
        AttemptLoginPlugin,
        VerifyLoginPlugin,
        SchemaPutPlugin,
        SchemaGeneratePlugin,
    ]


__all__ = [
    "get_builtin_plugins",
    "AttemptLoginPlugin",
    "SchemaGeneratePlugin",
    "SchemaPutPlugin",
    "ValidateMigrationsPlugin",
    "ValidateSchemaPlugin",
    "VerifyLoginPlugin",
]
