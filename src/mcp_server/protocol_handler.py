"""MCP Protocol Handler for JSON-RPC 2.0 message handling.

This module provides the ProtocolHandler class that encapsulates:
- Tool registration and schema management
- JSON-RPC error code handling
- Capability negotiation during initialize
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List

from mcp import types

from src.observability.logger import get_logger

if TYPE_CHECKING:
    from src.core.settings import Settings


DEFAULT_PROTOCOL_VERSION = "2025-06-18"
DEFAULT_SERVER_NAME = "moneyworks-ai-accountant"
DEFAULT_SERVER_VERSION = "0.1.0"


# JSON-RPC 2.0 Error Codes
class JSONRPCErrorCodes:
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


@dataclass
class ToolDefinition:
    """Definition of an MCP tool."""

    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Callable[..., Any]


@dataclass
class ProtocolHandler:
    """Handles MCP protocol operations including tool registration and execution.

    Attributes:
        server_name: Name of the MCP server.
        server_version: Version string of the server.
        protocol_version: Protocol version offered when the client sends none.
        tools: Registry of available tools.
    """

    server_name: str
    server_version: str
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    tools: Dict[str, ToolDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._logger = get_logger("moneyworks.mcp")

    def register_tool(
        self,
        name: str,
        description: str,
        input_schema: Dict[str, Any],
        handler: Callable[..., Any],
    ) -> None:
        """Register a tool with the protocol handler.

        Args:
            name: Unique name for the tool.
            description: Human-readable description of what the tool does.
            input_schema: JSON Schema for the tool's input parameters.
            handler: Async function that executes the tool logic.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if name in self.tools:
            raise ValueError(f"Tool '{name}' is already registered")

        self.tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=handler,
        )
        self._logger.info("Registered tool: %s", name)

    def get_tool_schemas(self) -> List[types.Tool]:
        """Get list of tool schemas for tools/list response."""
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in self.tools.values()
        ]

    async def execute_tool(
        self, name: str, arguments: Dict[str, Any]
    ) -> types.CallToolResult:
        """Execute a registered tool by name.

        Unknown tools, invalid parameters and handler failures are all
        reported as ``isError=True`` results rather than raised.

        Args:
            name: Name of the tool to execute.
            arguments: Arguments to pass to the tool handler.

        Returns:
            CallToolResult with content blocks or error indication.
        """
        if name not in self.tools:
            self._logger.warning("Tool not found: %s", name)
            return _error_result(f"Error: Tool '{name}' not found")

        tool = self.tools[name]
        try:
            self._logger.info("Executing tool: %s", name)
            result = await tool.handler(**arguments)

            if isinstance(result, types.CallToolResult):
                return result
            if isinstance(result, str):
                return types.CallToolResult(
                    content=[types.TextContent(type="text", text=result)],
                    isError=False,
                )
            if isinstance(result, list):
                return types.CallToolResult(content=result, isError=False)
            return types.CallToolResult(
                content=[types.TextContent(type="text", text=str(result))],
                isError=False,
            )

        except TypeError as e:
            self._logger.error("Invalid params for tool %s: %s", name, e)
            return _error_result(f"Error: Invalid parameters - {e}")
        except Exception:
            # Tracebacks stay in the server log
            self._logger.exception("Internal error executing tool %s", name)
            return _error_result(
                f"Error: Internal server error while executing '{name}'"
            )

    def get_capabilities(self) -> Dict[str, Any]:
        """Get server capabilities for initialize response."""
        return {"tools": {}}

    def build_initialize_result(self, params: Dict[str, Any] | None) -> Dict[str, Any]:
        """Build the MCP initialize result payload.

        The client's requested protocol version is echoed back when given.
        """
        params = params or {}
        return {
            "protocolVersion": params.get("protocolVersion") or self.protocol_version,
            "serverInfo": {"name": self.server_name, "version": self.server_version},
            "capabilities": self.get_capabilities(),
        }


def _error_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=True,
    )


def _register_default_tools(protocol_handler: ProtocolHandler) -> None:
    from src.mcp_server.tools.framework_info import register_tool as register_info_tool
    register_info_tool(protocol_handler)


def create_protocol_handler(
    settings: Settings | None = None,
    register_tools: bool = True,
) -> ProtocolHandler:
    """Create a protocol handler configured from settings.

    Args:
        settings: Application settings. When None, built-in defaults are used.
        register_tools: Whether to register default tools (default: True).

    Returns:
        Configured ProtocolHandler.
    """
    server_cfg: Dict[str, Any] = settings.server if settings is not None else {}
    protocol_handler = ProtocolHandler(
        server_name=str(server_cfg.get("name", DEFAULT_SERVER_NAME)),
        server_version=str(server_cfg.get("version", DEFAULT_SERVER_VERSION)),
        protocol_version=str(server_cfg.get("protocol_version", DEFAULT_PROTOCOL_VERSION)),
    )

    if register_tools:
        _register_default_tools(protocol_handler)

    return protocol_handler
