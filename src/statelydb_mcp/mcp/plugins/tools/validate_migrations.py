"""
Validate Migrations Plugin for MCP Tools.

This plugin checks the migrations inside a schema definition against a
published schema by running ``stately schema put --dry-run``.
"""

from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import SchemaPlugin
from statelydb_mcp.mcp.schemas import SchemaToolConfig, create_schema_tool_schema
from statelydb_mcp.mcp.structured import failure_response, verdict_response
from statelydb_mcp.services.stately.classifier import classify_migrations
from statelydb_mcp.services.stately.workspace import write_schema
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class ValidateMigrationsPlugin(SchemaPlugin):
    """Plugin for dry-run validation of schema migrations."""

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return "statelydb-validate-migrations"

    @property
    def description(self) -> str:
        """Get the plugin description."""
        return "Validate schema migrations inside of a StatelyDB elastic schema definition."

    @property
    def tags(self) -> list[str]:
        """Get plugin tags."""
        return ["schema", "stately", "validation", "migrations"]

    def get_input_schema(self) -> dict[str, Any]:
        return create_schema_tool_schema(SchemaToolConfig(
            include_schema_id=True,
            schema_description="The schema definition to validate"
        ))

    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute migration validation."""
        schema = arguments["schema"]
        schema_id = arguments["schemaId"]

        try:
            async with self.cli.workspaces.schema_workspace() as workspace:
                schema_file = await write_schema(workspace, schema)
                result = await self.cli.put(schema_id, schema_file, dry_run=True, cwd=workspace)
                verdict = classify_migrations(result)
        except Exception as e:
            logger.error(f"Migration validation for schema {schema_id} failed: {e}")
            return failure_response("Failed to validate migrations", e)

        logger.info(f"Migration validation for schema {schema_id} finished: valid={verdict.success}")
        return verdict_response(verdict)
