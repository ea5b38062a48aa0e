"""
Temporary workspace lifecycle for StatelyDB tool invocations.

Each invocation owns exactly one directory. Workspaces are handed out through
async context managers so that removal happens on every exit path.
"""

import asyncio
import shutil
import tempfile
import time
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

from statelydb_mcp.services.stately.process import ProcessResult, run_command
from statelydb_mcp.utils.config import StatelyMCPSettings, get_settings
from statelydb_mcp.utils.errors import ExecutionError, WorkspaceInitError
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)

SCHEMA_FILENAME = "schema.ts"
WORKSPACE_PREFIX = "statelydb-mcp"
GO_OUTPUT_PREFIX = "statelygo"
OUTPUT_PREFIX = "stately-gen-"

Runner = Callable[..., Awaitable[ProcessResult]]


class WorkspaceManager:
    """Creates and removes per-invocation workspace directories."""

    def __init__(self, settings: StatelyMCPSettings | None = None, runner: Runner | None = None):
        self.settings = settings or get_settings()
        self._runner = runner or run_command

    async def _run(self, command: str, args: Sequence[str], cwd: Path | None = None) -> ProcessResult:
        return await self._runner(command, args, cwd=cwd, timeout=self.settings.get_command_timeout())

    def new_workspace_path(self) -> Path:
        """Choose a unique, not yet existing workspace path."""
        root = self.settings.get_workspace_root()
        while True:
            millis = int(time.time() * 1000)
            path = root / f"{WORKSPACE_PREFIX}-{millis}-{uuid.uuid4().hex[:8]}"
            if not path.exists():
                return path

    async def provision(self) -> Path:
        """Create a schema workspace with ``stately schema init``.

        Returns:
            Path of the initialized workspace

        Raises:
            WorkspaceInitError: If the init command fails
        """
        path = self.new_workspace_path()
        await self._init_schema_dir(path)
        return path

    async def _init_schema_dir(self, path: Path) -> None:
        cli = self.settings.stately_cli
        try:
            result = await self._run(cli, ["schema", "init", str(path)])
            result.check(f"{cli} schema init")
        except ExecutionError as e:
            logger.error(f"Failed to initialize stately schema in {path}: {e}")
            raise WorkspaceInitError(
                f"Failed to initialize stately schema: {e}",
                stdout=e.stdout,
                stderr=e.stderr,
                suggestions=e.suggestions,
                context={"workspace": str(path)},
            ) from e
        logger.debug(f"Initialized schema workspace: {path}")

    async def _init_go_module(self, path: Path) -> None:
        go = self.settings.go_cli
        try:
            result = await self._run(go, ["mod", "init", self.settings.go_module_path], cwd=path)
            result.check(f"{go} mod init")
        except ExecutionError as e:
            logger.error(f"Failed to initialize Go module in {path}: {e}")
            raise WorkspaceInitError(
                f"Failed to initialize Go module. Make sure Go is installed and available in your PATH. {e}",
                stdout=e.stdout,
                stderr=e.stderr,
                context={"workspace": str(path)},
            ) from e
        logger.debug(f"Initialized Go module {self.settings.go_module_path} in {path}")

    async def dispose(self, path: Path) -> None:
        """Recursively remove a workspace. Failures are logged, never raised."""
        try:
            await asyncio.to_thread(shutil.rmtree, path)
            logger.debug(f"Removed workspace: {path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Failed to clean up temporary directory {path}: {e}")

    @asynccontextmanager
    async def schema_workspace(self) -> AsyncIterator[Path]:
        """Provision a schema workspace and remove it on exit."""
        path = self.new_workspace_path()
        try:
            await self._init_schema_dir(path)
            yield path
        finally:
            await self.dispose(path)

    @asynccontextmanager
    async def output_workspace(self, language: str) -> AsyncIterator[Path]:
        """Provision an empty output directory for code generation.

        Go output gets a directory name without dashes (a valid package name)
        and an initialized module so the generated code is importable.
        """
        prefix = GO_OUTPUT_PREFIX if language == "go" else OUTPUT_PREFIX
        root = self.settings.get_workspace_root()
        try:
            path = Path(await asyncio.to_thread(tempfile.mkdtemp, prefix=prefix, dir=root))
        except OSError as e:
            raise WorkspaceInitError(f"Failed to create output directory: {e}") from e

        try:
            if language == "go":
                await self._init_go_module(path)
            yield path
        finally:
            await self.dispose(path)


async def write_schema(workspace: Path, schema: str) -> Path:
    """Write schema text to ``schema.ts`` inside the workspace."""
    schema_file = workspace / SCHEMA_FILENAME
    await asyncio.to_thread(schema_file.write_text, schema, encoding="utf-8")
    return schema_file
