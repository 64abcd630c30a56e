"""MCP server exposing the upgrade helper tools over stdio."""

from typing import Dict, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .dispatcher import TOOLS, ToolDispatcher
from ..core.config import UpgradeHelperConfig
from ..core.scraper import UpgradeScraper


SERVER_NAME = "react-native-upgrade-helper"
SERVER_VERSION = "1.0.0"


class ToolCallError(Exception):
    """Carries an error envelope's text; the MCP server flags it isError."""


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Low-level MCP server wired to a dispatcher."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [types.Tool(**tool) for tool in TOOLS]

    # Arguments are checked by the dispatcher so every rejection carries
    # the same "Error: " envelope.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict) -> List[types.TextContent]:
        response = await dispatcher.call(name, arguments)
        if response.is_error:
            raise ToolCallError(response.text)
        return [types.TextContent(type="text", text=response.text)]

    return server


async def serve(config: UpgradeHelperConfig = None):
    """Run until the client closes stdin."""
    config = config or UpgradeHelperConfig.from_env()
    server = build_server(ToolDispatcher(UpgradeScraper(config)))

    async with stdio_server() as (read_stream, write_stream):
        config.log("React Native Upgrade Helper MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
