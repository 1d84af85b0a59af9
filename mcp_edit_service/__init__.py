"""mcp_edit_service: MCP server exposing an edit_file tool backed by a fast-apply model.

Import the submodules you need (server, container, use_cases...) directly.
"""

__version__ = "1.0.0"

__all__: list[str] = []
