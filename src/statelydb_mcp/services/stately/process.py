"""
Asynchronous invocation of external command-line programs.

A program that runs and exits is always reported as a ProcessResult, whatever
its exit code, because several tools treat specific output as the real signal.
Only spawn failures and timeouts raise, and they keep the partial output.
"""

import asyncio
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from statelydb_mcp.utils.errors import ExecutionError
from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)

_READ_CHUNK = 4096


@dataclass
class ProcessResult:
    """Captured output of a finished external program."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        """Whether the program exited with status 0."""
        return self.returncode == 0

    def check(self, description: str) -> "ProcessResult":
        """Raise ExecutionError unless the program exited with status 0.

        Args:
            description: Command description used in the error message

        Returns:
            This result, for chaining
        """
        if not self.ok:
            message = f"Command failed: {description} (exit code {self.returncode})"
            if self.stderr.strip():
                message += f"\n{self.stderr.strip()}"
            raise ExecutionError(
                message,
                stdout=self.stdout,
                stderr=self.stderr,
                returncode=self.returncode,
            )
        return self


def _decode(data: bytes | bytearray) -> str:
    return bytes(data).decode("utf-8", errors="replace")


async def _drain(stream: asyncio.StreamReader | None, sink: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            break
        sink.extend(chunk)


async def run_command(
    command: str,
    args: Sequence[str] = (),
    cwd: Path | None = None,
    timeout: float | None = None,
) -> ProcessResult:
    """Run an external program and capture its output.

    Args:
        command: Executable name or path
        args: Arguments passed as an argument vector (no shell)
        cwd: Optional working directory
        timeout: Optional bound in seconds; the process is killed when exceeded

    Returns:
        ProcessResult with decoded stdout/stderr and the exit code

    Raises:
        ExecutionError: If the program cannot be spawned or times out
    """
    argv = [command, *args]
    description = " ".join(argv)
    logger.debug(f"Running command: {description} (cwd={cwd})")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            cwd=str(cwd) if cwd else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        logger.error(f"Failed to start command '{description}': {e}")
        raise ExecutionError(
            f"Failed to start '{command}': {e}",
            suggestions=[f"Make sure '{command}' is installed and available in your PATH"],
            context={"command": description},
        ) from e

    stdout = bytearray()
    stderr = bytearray()
    started = time.monotonic()

    async def _communicate() -> int:
        await asyncio.gather(_drain(process.stdout, stdout), _drain(process.stderr, stderr))
        return await process.wait()

    async def _terminate() -> None:
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        await process.wait()

    try:
        returncode = await asyncio.wait_for(_communicate(), timeout=timeout)
    except asyncio.CancelledError:
        logger.warning(f"Command cancelled, killing process {process.pid}: {description}")
        await asyncio.shield(_terminate())
        raise
    except asyncio.TimeoutError as e:
        logger.error(f"Command timed out after {timeout}s: {description}")
        await _terminate()
        raise ExecutionError(
            f"Command timed out after {timeout} seconds: {description}",
            stdout=_decode(stdout),
            stderr=_decode(stderr),
            context={"command": description, "timeout": timeout},
        ) from e

    elapsed_ms = (time.monotonic() - started) * 1000
    logger.info(f"Command finished: {description} exit={returncode} ({elapsed_ms:.0f}ms)")

    return ProcessResult(stdout=_decode(stdout), stderr=_decode(stderr), returncode=returncode)
