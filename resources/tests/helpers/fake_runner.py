"""
Scriptable stand-in for the external process runner.

Usage:
    from resources.tests.helpers.fake_runner import FakeRunner
    runner = FakeRunner()
    runner.on("schema", "validate", stdout="Schema is valid\n")
    cli = StatelyCLI(settings, runner=runner)

``schema init <dir>`` creates the directory by default, like the real CLI.
Responses are matched on the longest registered argument prefix.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from statelydb_mcp.services.stately.process import ProcessResult


@dataclass
class RecordedCall:
    command: str
    args: list[str]
    cwd: Path | None
    timeout: float | None


@dataclass
class Scripted:
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    error: Exception | None = None
    files: dict[str, str | bytes] = field(default_factory=dict)
    action: Callable[[list[str], Path | None], None] | None = None


class FakeRunner:
    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self._scripts: dict[tuple[str, ...], Scripted] = {}

    def on(self, *prefix: str, **kwargs) -> FakeRunner:
        self._scripts[tuple(prefix)] = Scripted(**kwargs)
        return self

    def args_of(self, *prefix: str) -> list[list[str]]:
        """Argument lists of every recorded call starting with prefix."""
        return [c.args for c in self.calls if tuple(c.args[:len(prefix)]) == prefix]

    def _lookup(self, args: list[str]) -> Scripted | None:
        best: tuple[str, ...] | None = None
        for prefix in self._scripts:
            if tuple(args[:len(prefix)]) == prefix and (best is None or len(prefix) > len(best)):
                best = prefix
        return self._scripts[best] if best is not None else None

    async def __call__(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> ProcessResult:
        args = list(args)
        self.calls.append(RecordedCall(command, args, cwd, timeout))
        script = self._lookup(args)

        if args[:2] == ["schema", "init"] and (script is None or script.action is None):
            Path(args[2]).mkdir(parents=True)

        if script is None:
            return ProcessResult(stdout="", stderr="", returncode=0)

        if script.action is not None:
            script.action(args, cwd)

        if script.files:
            target = Path(args[-1])
            for rel_path, content in script.files.items():
                path = target / rel_path
                path.parent.mkdir(parents=True, exist_ok=True)
                if isinstance(content, bytes):
                    path.write_bytes(content)
                else:
                    path.write_text(content, encoding="utf-8")

        if script.error is not None:
            raise script.error

        return ProcessResult(stdout=script.stdout, stderr=script.stderr, returncode=script.returncode)
