"""MCP Tool: get_framework_info

Reports which framework and server the client is talking to.

Usage via MCP:
    Tool name: get_framework_info
    Input schema: no arguments
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from mcp import types

from src.core.bootstrap import BANNER_LINES, FRAMEWORK_NAME

if TYPE_CHECKING:
    from src.mcp_server.protocol_handler import ProtocolHandler

logger = logging.getLogger(__name__)


# Tool metadata
TOOL_NAME = "get_framework_info"
TOOL_DESCRIPTION = """Describe the MoneyWorks AI Accountant framework serving this session.

Returns the framework name, MCP server name and version, and the
protocol version the server offers.
"""

TOOL_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {},
    "required": [],
}


@dataclass
class FrameworkInfo:
    """Identity of the running framework."""

    server_name: str
    server_version: str
    protocol_version: str
    framework_name: str = FRAMEWORK_NAME
    banner: List[str] = field(default_factory=lambda: list(BANNER_LINES))

    def format_response(self) -> str:
        lines = [
            f"## {self.framework_name}\n",
            f"- Server: {self.server_name} {self.server_version}",
            f"- Protocol version: {self.protocol_version}",
            "",
            *self.banner,
        ]
        return "\n".join(lines)


def register_tool(protocol_handler: ProtocolHandler) -> None:
    """Register the get_framework_info tool with the protocol handler.

    Args:
        protocol_handler: ProtocolHandler instance to register with.
    """
    info = FrameworkInfo(
        server_name=protocol_handler.server_name,
        server_version=protocol_handler.server_version,
        protocol_version=protocol_handler.protocol_version,
    )

    async def handler() -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=info.format_response())],
            isError=False,
        )

    protocol_handler.register_tool(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        input_schema=TOOL_INPUT_SCHEMA,
        handler=handler,
    )

    logger.info("Registered MCP tool: %s", TOOL_NAME)
