"""
Attempt Login Plugin for MCP Tools.

This plugin starts the StatelyDB device login flow and hands the activation
URL back to the caller, who has to open it in a browser.
"""

from typing import Any

from mcp import types

from statelydb_mcp.mcp.plugins.base import AccountPlugin
from statelydb_mcp.mcp.schemas import create_account_schema
from statelydb_mcp.mcp.structured import failure_response, verdict_response
from statelydb_mcp.services.stately.classifier import classify_login
from statelydb_mcp.utils.errors import ExecutionError
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


class AttemptLoginPlugin(AccountPlugin):
    """Plugin for initiating the login flow."""

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return "statelydb-attempt-login"

    @property
    def description(self) -> str:
        """Get the plugin description."""
        return "Initiate StatelyDB login process and get an authorization URL"

    def get_input_schema(self) -> dict[str, Any]:
        return create_account_schema()

    async def execute(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """Execute login initiation."""
        auth_host = self.cli.settings.auth_host

        try:
            result = await self.cli.login()
            result.check("stately login")
        except ExecutionError as e:
            # The URL may already have been printed before the command failed or timed out.
            verdict = classify_login(e.stdout, e.stderr, auth_host)
            if verdict.success:
                logger.warning(f"Login command failed after printing the activation URL: {e}")
                return verdict_response(verdict)
            logger.error(f"Login failed: {e}")
            return failure_response("Failed to initiate login", e)
        except Exception as e:
            logger.error(f"Login failed: {e}")
            return failure_response("Failed to initiate login", e)

        verdict = classify_login(result.stdout, result.stderr, auth_host)
        if verdict.is_error:
            logger.warning("Login output did not contain an activation URL")
        return verdict_response(verdict)
