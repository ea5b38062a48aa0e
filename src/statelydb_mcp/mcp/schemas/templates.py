"""
Schema Templates for MCP Tools.

This module provides the input schema templates shared by the StatelyDB
tools, so that the same field is described the same way everywhere.
"""

from dataclasses import dataclass, field
from typing import Any

from statelydb_mcp.services.stately.cli import SUPPORTED_LANGUAGES


@dataclass
class SchemaToolConfig:
    """Configuration for schema operation tool schemas."""

    include_schema: bool = True
    include_schema_id: bool = False
    include_language: bool = False
    schema_description: str = "The schema definition"
    languages: list[str] = field(default_factory=lambda: list(SUPPORTED_LANGUAGES))


def create_schema_tool_schema(config: SchemaToolConfig | None = None) -> dict[str, Any]:
    """Create an input schema for a schema operation tool.

    Args:
        config: Optional configuration for customization

    Returns:
        JSON schema for the tool's arguments
    """
    if config is None:
        config = SchemaToolConfig()

    properties: dict[str, Any] = {}
    required: list[str] = []

    if config.include_schema:
        properties["schema"] = {
            "type": "string",
            "description": config.schema_description
        }
        required.append("schema")

    if config.include_schema_id:
        properties["schemaId"] = {
            "type": "string",
            "description": "The schema ID"
        }
        required.append("schemaId")

    if config.include_language:
        properties["language"] = {
            "type": "string",
            "enum": config.languages,
            "description": "The language to generate code for"
        }
        required.append("language")

    return {
        "type": "object",
        "properties": properties,
        "required": required
    }


def create_account_schema() -> dict[str, Any]:
    """Create the (argument-free) schema used by login tools."""
    return {
        "type": "object",
        "properties": {},
        "required": []
    }
