"""
Schema Generate Plugin for MCP Tools.

This plugin generates client code from a published schema with
``stately schema generate`` and returns every generated file inline.
"""

import asyncio
from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import SchemaPlugin
from statelydb_mcp.mcp.schemas import SchemaToolConfig, create_schema_tool_schema
from statelydb_mcp.mcp.structured import error_response, failure_response, text_response
from statelydb_mcp.services.stately.collector import collect_files, render_files
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class SchemaGeneratePlugin(SchemaPlugin):
    """Plugin for generating client code from a published schema."""

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return "statelydb-schema-generate"

    @property
    def description(self) -> str:
        """Get the plugin description."""
        return (
            "Generate client code from a published StatelyDB schema version definition. "
            "Supported languages: TypeScript, Python, Ruby, Go."
        )

    @property
    def tags(self) -> list[str]:
        """Get plugin tags."""
        return ["schema", "stately", "codegen"]

    def get_input_schema(self) -> dict[str, Any]:
        return create_schema_tool_schema(SchemaToolConfig(
            include_schema=False,
            include_schema_id=True,
            include_language=True
        ))

    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute code generation."""
        schema_id = arguments["schemaId"]
        language = arguments["language"]

        try:
            async with self.cli.workspaces.output_workspace(language) as output_dir:
                result = await self.cli.generate(schema_id, language, output_dir)
                result.check("stately schema generate")
                files = await asyncio.to_thread(collect_files, output_dir)
        except Exception as e:
            logger.error(f"Generating {language} code for schema {schema_id} failed: {e}")
            return failure_response("Failed to generate schema", e)

        if not files:
            logger.warning(f"No files generated for schema {schema_id} ({language})")
            return error_response("No files were generated.")

        logger.info(f"Generated {len(files)} {language} files for schema {schema_id}")
        return text_response(render_files(files, language))
