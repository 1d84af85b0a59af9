"""
MCP server exposing the registered tools over the low-level protocol API.
"""

import logging
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from mcp_edit_service import __version__
from mcp_edit_service.ports.llm.tools_port import ToolsHandlerPort

SERVER_NAME = "mcp-edit-service"


def build_server(
    tools_handler: ToolsHandlerPort, logger: Optional[logging.Logger] = None
) -> Server:
    """
    Create an MCP server whose tools are served by the given handler.

    Args:
        tools_handler: Handler listing and dispatching tools
        logger: Logger instance to use for logging

    Returns:
        Configured low-level MCP server
    """
    log = logger or logging.getLogger(__name__)
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=spec["name"],
                description=spec["description"],
                inputSchema=spec["parameters"],
            )
            for spec in tools_handler.available_tools()
        ]

    # Arguments are validated by the tool itself so malformed calls still get a JSON envelope
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        log.info(f"Tool call: {name}")
        text = await tools_handler.dispatch(name, arguments)
        return [types.TextContent(type="text", text=text)]

    # The SDK wrapper reports handler exceptions as isError results; unknown
    # names must fail as METHOD_NOT_FOUND protocol errors instead
    sdk_call_tool = server.request_handlers[types.CallToolRequest]

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        known = {spec["name"] for spec in tools_handler.available_tools()}
        if req.params.name not in known:
            log.warning(f"Unknown tool requested: {req.params.name}")
            raise McpError(
                types.ErrorData(
                    code=types.METHOD_NOT_FOUND,
                    message=f"Unknown tool: {req.params.name}",
                )
            )
        return await sdk_call_tool(req)

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def run_stdio(server: Server) -> None:
    """Serve over stdin/stdout until the client closes the stream."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )
