"""
Custom exception classes for the StatelyDB MCP server.
"""

from typing import Any


class StatelyMCPError(Exception):
    """Base exception for all StatelyDB MCP server errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize error with enhanced information.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            suggestions: List of suggested remediation steps
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.error_code = error_code or self.__class__.__name__.upper()
        self.suggestions = suggestions or []
        self.context = context or {}


class ServiceError(StatelyMCPError):
    """Base exception for errors occurring in service layers."""
    pass


class ExecutionError(ServiceError):
    """Raised when an external command cannot be spawned, times out or exits badly.

    Whatever output was captured before the failure is kept so callers can
    still report it (or classify it).
    """

    def __init__(
        self,
        message: str,
        stdout: str = "",
        stderr: str = "",
        returncode: int | None = None,
        **kwargs: Any
    ):
        super().__init__(message, **kwargs)
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode


class WorkspaceInitError(ServiceError):
    """Raised when a temporary workspace cannot be provisioned."""

    def __init__(self, message: str, stdout: str = "", stderr: str = "", **kwargs: Any):
        super().__init__(message, **kwargs)
        self.stdout = stdout
        self.stderr = stderr


class PluginError(StatelyMCPError):
    """Raised when there's a plugin-related error."""
    pass
