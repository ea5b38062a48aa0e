"""
Schema Put Plugin for MCP Tools.

This plugin publishes a new version of an elastic schema with
``stately schema put``.
"""

from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import SchemaPlugin
from statelydb_mcp.mcp.schemas import SchemaToolConfig, create_schema_tool_schema
from statelydb_mcp.mcp.structured import failure_response, verdict_response
from statelydb_mcp.services.stately.classifier import classify_put
from statelydb_mcp.services.stately.workspace import write_schema
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class SchemaPutPlugin(SchemaPlugin):
    """Plugin for publishing a schema version."""

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return "statelydb-schema-put"

    @property
    def description(self) -> str:
        """Get the plugin description."""
        return "Publish an elastic schema version definition to StatelyDB"

    @property
    def tags(self) -> list[str]:
        """Get plugin tags."""
        return ["schema", "stately", "publish"]

    def get_input_schema(self) -> dict[str, Any]:
        return create_schema_tool_schema(SchemaToolConfig(
            include_schema_id=True,
            schema_description="The schema definition to publish"
        ))

    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute schema publishing."""
        schema = arguments["schema"]
        schema_id = arguments["schemaId"]

        try:
            async with self.cli.workspaces.schema_workspace() as workspace:
                schema_file = await write_schema(workspace, schema)
                result = await self.cli.put(schema_id, schema_file, cwd=workspace)
                result.check("stately schema put")
                verdict = classify_put(result)
        except Exception as e:
            logger.error(f"Publishing schema {schema_id} failed: {e}")
            return failure_response("Failed to publish schema!", e, separator=" ")

        logger.info(f"Publishing schema {schema_id} finished: published={verdict.success}")
        return verdict_response(verdict)
