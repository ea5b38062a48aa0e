"""
Service wrapper around the stately command-line program.

Plugins talk to this class instead of spawning processes themselves, which
keeps command lines in one place and lets tests swap in a fake runner.
"""

from collections.abc import Sequence
from pathlib import Path

from statelydb_mcp.services.stately.process import ProcessResult, run_command
from statelydb_mcp.services.stately.workspace import Runner, WorkspaceManager
from statelydb_mcp.utils.config import StatelyMCPSettings, get_settings
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)

SUPPORTED_LANGUAGES = ["typescript", "python", "ruby", "go"]


class StatelyCLI:
    """Runs stately CLI commands and provides workspaces for them."""

    def __init__(self, settings: StatelyMCPSettings | None = None, runner: Runner | None = None):
        """Initialize the service.

        Args:
            settings: Optional settings override
            runner: Coroutine used to run external programs (defaults to run_command)
        """
        self.settings = settings or get_settings()
        self._runner = runner or run_command
        self.workspaces = WorkspaceManager(self.settings, self._runner)

    async def run(self, args: Sequence[str], cwd: Path | None = None) -> ProcessResult:
        """Run ``stately`` with the given arguments."""
        return await self._runner(
            self.settings.stately_cli,
            list(args),
            cwd=cwd,
            timeout=self.settings.get_command_timeout(),
        )

    async def validate(self, schema_file: Path, cwd: Path | None = None) -> ProcessResult:
        return await self.run(["schema", "validate", str(schema_file)], cwd=cwd)

    async def put(
        self,
        schema_id: str,
        schema_file: Path,
        dry_run: bool = False,
        cwd: Path | None = None
    ) -> ProcessResult:
        args = ["schema", "put", "-s", schema_id, str(schema_file)]
        if dry_run:
            args.append("--dry-run")
        return await self.run(args, cwd=cwd)

    async def generate(self, schema_id: str, language: str, output_dir: Path) -> ProcessResult:
        return await self.run(["schema", "generate", "-s", schema_id, "-l", language, str(output_dir)])

    async def login(self) -> ProcessResult:
        return await self.run(["login"])

    async def whoami(self) -> ProcessResult:
        return await self.run(["whoami"])
