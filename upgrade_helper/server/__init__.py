"""Tool dispatch and MCP transport."""

from .dispatcher import TOOLS, ToolDispatcher, ToolResponse

__all__ = ['TOOLS', 'ToolDispatcher', 'ToolResponse']
