"""Task manager MCP server: structured tasks with dependency-aware ordering."""

__version__ = "0.11.1"
