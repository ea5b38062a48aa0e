"""
Helpers to build the uniform tool response envelope.

Every tool answers with a ``CallToolResult`` holding exactly one text block
and an ``isError`` flag.
"""

from __future__ import annotations

from mcp import types

from statelydb_mcp.services.stately.classifier import Verdict


def text_response(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def error_response(text: str) -> types.CallToolResult:
    return text_response(text, is_error=True)


def verdict_response(verdict: Verdict) -> types.CallToolResult:
    return text_response(verdict.message, is_error=verdict.is_error)


def failure_response(prefix: str, error: BaseException, separator: str = ": ") -> types.CallToolResult:
    """Error envelope for an exception, with any partial command output appended."""
    text = f"{prefix}{separator}{error}"
    stdout = getattr(error, "stdout", "") or ""
    if stdout:
        text += f"\n\nCommand output: {stdout}"
    return error_response(text)


def response_text(result: types.CallToolResult) -> str:
    """Concatenated text of all text blocks in an envelope."""
    return "\n".join(block.text for block in result.content if isinstance(block, types.TextContent))
