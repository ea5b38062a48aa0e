"""
Configuration management for the StatelyDB MCP server.

This module provides centralized configuration using Pydantic settings
with support for environment variables and .env files.
"""

import os
import shutil
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationResult(BaseModel):
    valid: bool = True
    errors: list[str] = []
    warnings: list[str] = []


class StatelyMCPSettings(BaseSettings):
    """StatelyDB MCP server configuration settings."""

    # Application
    app_name: str = "statelydb-mcp"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # External programs
    stately_cli: str = Field(default="stately", description="Name or path of the stately CLI executable")
    go_cli: str = Field(default="go", description="Name or path of the Go toolchain executable")
    go_module_path: str = Field(
        default="github.com/stately/schema",
        description="Import path used for 'go mod init' before generating Go code"
    )
    auth_host: str = Field(default="oauth.stately.cloud", description="Host serving the login activation URL")
    command_timeout_seconds: float = Field(
        default=300.0,
        description="Upper bound for a single external command in seconds (0 disables the bound)"
    )

    # Workspaces
    workspace_root: str = Field(
        default="",
        description="Parent directory for temporary workspaces (defaults to the system temp directory)"
    )

    # MCP server settings
    mcp_server_name: str = Field(default="statelydb-mcp-server")
    mcp_server_version: str = Field(default="1.0.0")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str = Field(default="", description="Optional log file path")
    log_structured: bool = Field(default=False, description="Emit JSON log records")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="STATELYDB_MCP_",
        extra="ignore",
    )

    def get_workspace_root(self) -> Path:
        """Get the workspace parent directory as a Path object."""
        if self.workspace_root:
            return Path(self.workspace_root).expanduser().resolve()
        return Path(tempfile.gettempdir())

    def get_command_timeout(self) -> float | None:
        """Get the external command timeout, or None when unbounded."""
        if self.command_timeout_seconds and self.command_timeout_seconds > 0:
            return self.command_timeout_seconds
        return None

    def get_log_file_path(self) -> Path | None:
        """Get log file path as Path object."""
        if not self.log_file:
            return None
        path = Path(self.log_file).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def validate_settings(self) -> ValidationResult:
        """Validate settings and return status information."""
        status = ValidationResult()

        root = self.get_workspace_root()
        if not root.is_dir():
            status.errors.append(f"Workspace root does not exist: {root}")
            status.valid = False
        elif not os.access(root, os.W_OK):
            status.errors.append(f"Workspace root is not writable: {root}")
            status.valid = False

        if self.command_timeout_seconds < 0:
            status.errors.append("Command timeout must not be negative")
            status.valid = False

        if shutil.which(self.stately_cli) is None:
            status.warnings.append(
                f"'{self.stately_cli}' was not found on PATH. StatelyDB tools will fail until it is installed."
            )

        if shutil.which(self.go_cli) is None:
            status.warnings.append(
                f"'{self.go_cli}' was not found on PATH. Go code generation will be unavailable."
            )

        return status


# Global settings instance
settings = StatelyMCPSettings()


def get_settings() -> StatelyMCPSettings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> StatelyMCPSettings:
    """Reload settings from environment and return new instance."""
    global settings
    settings = StatelyMCPSettings()
    return settings
