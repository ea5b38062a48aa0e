"""
Validate Schema Plugin for MCP Tools.

This plugin validates a StatelyDB elastic schema definition by writing it to
a fresh schema workspace and running ``stately schema validate`` on it.
"""

from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import SchemaPlugin
from statelydb_mcp.mcp.schemas import SchemaToolConfig, create_schema_tool_schema
from statelydb_mcp.mcp.structured import failure_response, verdict_response
from statelydb_mcp.services.stately.classifier import classify_validate
from statelydb_mcp.services.stately.workspace import write_schema
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class ValidateSchemaPlugin(SchemaPlugin):
    """Plugin for validating a schema definition."""

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return "statelydb-validate-schema"

    @property
    def description(self) -> str:
        """Get the plugin description."""
        return "Validate a StatelyDB elastic schema definition."

    @property
    def tags(self) -> list[str]:
        """Get plugin tags."""
        return ["schema", "stately", "validation"]

    def get_input_schema(self) -> dict[str, Any]:
        return create_schema_tool_schema(SchemaToolConfig(
            schema_description="The schema definition to validate"
        ))

    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute schema validation."""
        schema = arguments["schema"]

        try:
            async with self.cli.workspaces.schema_workspace() as workspace:
                schema_file = await write_schema(workspace, schema)
                result = await self.cli.validate(schema_file, cwd=workspace)
                verdict = classify_validate(result)
        except Exception as e:
            logger.error(f"Schema validation failed: {e}")
            return failure_response("Failed to validate schema", e)

        logger.info(f"Schema validation finished: valid={verdict.success}")
        return verdict_response(verdict)
