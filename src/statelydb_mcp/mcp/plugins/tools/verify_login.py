"""
Verify Login Plugin for MCP Tools.

This plugin reports whether the user is logged in, along with the
organizations, stores and schemas ``stately whoami`` lists.
"""

from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import AccountPlugin
from statelydb_mcp.mcp.schemas import create_account_schema
from statelydb_mcp.mcp.structured import failure_response, verdict_response
from statelydb_mcp.services.stately.classifier import classify_whoami
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class VerifyLoginPlugin(AccountPlugin):
    """Plugin for checking the current login."""

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return "statelydb-verify-login"

    @property
    def description(self) -> str:
        """Get the plugin description."""
        return (
            "Verify if the user is logged in to StatelyDB. This command can also tell you "
            "what organizations, stores, and schemas you have access to."
        )

    def get_input_schema(self) -> dict[str, Any]:
        return create_account_schema()

    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute login verification."""
        try:
            result = await self.cli.whoami()
            result.check("stately whoami")
        except Exception as e:
            logger.error(f"Login verification failed: {e}")
            return failure_response("Failed to verify login", e)

        return verdict_response(classify_whoami(result))
