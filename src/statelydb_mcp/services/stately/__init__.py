"""
Bridge between MCP tools and the stately command-line program.
"""

from .classifier import (
    Verdict,
    classify_login,
    classify_migrations,
    classify_put,
    classify_validate,
    classify_whoami,
    extract_activation_url,
)
from .cli import SUPPORTED_LANGUAGES, StatelyCLI
from .collector import CollectedFile, collect_files, language_tag, render_files
from .process import ProcessResult, run_command
from .workspace import SCHEMA_FILENAME, WorkspaceManager, write_schema

__all__ = [
    "SCHEMA_FILENAME",
    "SUPPORTED_LANGUAGES",
    "CollectedFile",
    "ProcessResult",
    "StatelyCLI",
    "Verdict",
    "WorkspaceManager",
    "classify_login",
    "classify_migrations",
    "classify_put",
    "classify_validate",
    "classify_whoami",
    "collect_files",
    "extract_activation_url",
    "language_tag",
    "render_files",
    "run_command",
    "write_schema",
]
