"""
Structured response scaffolding for MCP tools.
"""

from .responses import (
    error_response,
    failure_response,
    response_text,
    text_response,
    verdict_response,
)

__all__ = [
    "error_response",
    "failure_response",
    "response_text",
    "text_response",
    "verdict_response",
]
