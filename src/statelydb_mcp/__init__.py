"""
StatelyDB MCP Server - schema management tools for AI agents.

This package provides:
- MCP tools wrapping the ``stately`` command-line program
- Scoped temporary workspaces for schema files and generated code
- Output classification for validate, publish, login and generate commands
"""

__version__ = "1.0.0"
