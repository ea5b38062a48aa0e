"""
MCP Schema helpers.

This package provides the input schema templates for StatelyDB tools and
validation of tool arguments against them.
"""

from .templates import SchemaToolConfig, create_account_schema, create_schema_tool_schema
from .validator import SchemaValidator, ValidationIssue, ValidationResult

__all__ = [
    "SchemaToolConfig",
    "SchemaValidator",
    "ValidationIssue",
    "ValidationResult",
    "create_account_schema",
    "create_schema_tool_schema",
]
