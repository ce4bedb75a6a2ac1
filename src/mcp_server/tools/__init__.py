"""
MCP Server Tools.

This package contains the MCP tool definitions exposed to clients.
"""

from src.mcp_server.tools.framework_info import (
    TOOL_NAME as FRAMEWORK_INFO_NAME,
    TOOL_DESCRIPTION as FRAMEWORK_INFO_DESCRIPTION,
    TOOL_INPUT_SCHEMA as FRAMEWORK_INFO_SCHEMA,
    FrameworkInfo,
    register_tool as register_framework_info,
)

__all__ = [
    "FRAMEWORK_INFO_NAME",
    "FRAMEWORK_INFO_DESCRIPTION",
    "FRAMEWORK_INFO_SCHEMA",
    "FrameworkInfo",
    "register_framework_info",
]
