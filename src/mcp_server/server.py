"""MCP Server entry point for stdio transport.

This module implements a newline-delimited JSON-RPC 2.0 loop supporting
``initialize``, ``ping``, ``tools/list`` and ``tools/call``. It ensures
stdout only contains protocol messages while all logs go to stderr.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional

from src.core.settings import DEFAULT_SETTINGS_PATH, Settings, load_settings
from src.mcp_server.protocol_handler import (
    JSONRPCErrorCodes,
    ProtocolHandler,
    create_protocol_handler,
)
from src.observability.logger import get_logger, get_trace_logger


def _error_response(request_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def _result_response(request_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _is_error_response(response: Optional[Dict[str, Any]]) -> bool:
    # Tool failures come back as results flagged with isError
    if response is None:
        return False
    if "error" in response:
        return True
    result = response.get("result")
    return isinstance(result, dict) and bool(result.get("isError"))


def _write_response(payload: Dict[str, Any]) -> None:
    """Write a JSON-RPC response to stdout."""

    sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")
    sys.stdout.flush()


def handle_request(
    protocol_handler: ProtocolHandler, request: Any
) -> Optional[Dict[str, Any]]:
    """Handle a single JSON-RPC request.

    Args:
        protocol_handler: Handler holding server identity and tools.
        request: Parsed JSON-RPC payload.

    Returns:
        JSON-RPC response payload, or None for notifications.
    """

    if not isinstance(request, dict) or not isinstance(request.get("method"), str):
        request_id = request.get("id") if isinstance(request, dict) else None
        return _error_response(
            request_id, JSONRPCErrorCodes.INVALID_REQUEST, "Invalid Request"
        )

    method = request["method"]
    request_id = request.get("id")
    params = request.get("params") or {}

    # Notifications never get a response
    if "id" not in request:
        return None

    if not isinstance(params, dict):
        return _error_response(
            request_id,
            JSONRPCErrorCodes.INVALID_PARAMS,
            "Invalid params: 'params' must be an object",
        )

    if method == "initialize":
        return _result_response(
            request_id, protocol_handler.build_initialize_result(params)
        )

    if method == "ping":
        return _result_response(request_id, {})

    if method == "tools/list":
        tools = [
            tool.model_dump(by_alias=True, exclude_none=True)
            for tool in protocol_handler.get_tool_schemas()
        ]
        return _result_response(request_id, {"tools": tools})

    if method == "tools/call":
        name = params.get("name")
        if not isinstance(name, str) or not name:
            return _error_response(
                request_id,
                JSONRPCErrorCodes.INVALID_PARAMS,
                "Invalid params: 'name' is required",
            )
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            return _error_response(
                request_id,
                JSONRPCErrorCodes.INVALID_PARAMS,
                "Invalid params: 'arguments' must be an object",
            )
        result = asyncio.run(protocol_handler.execute_tool(name, arguments))
        return _result_response(
            request_id, result.model_dump(by_alias=True, exclude_none=True)
        )

    return _error_response(
        request_id, JSONRPCErrorCodes.METHOD_NOT_FOUND, "Method not found"
    )


def run_stdio_server(settings: Settings) -> int:
    """Run MCP server over stdio.

    Args:
        settings: Loaded application settings.

    Returns:
        Exit code.
    """

    observability = settings.observability
    logger = get_logger("moneyworks.server", log_level=observability.get("log_level"))
    trace_logger: Optional[logging.Logger] = None
    if observability.get("trace_enabled"):
        trace_logger = get_trace_logger(
            observability.get("traces_path", "logs/traces.jsonl")
        )

    protocol_handler = create_protocol_handler(settings)
    logger.info(
        "Starting MCP server %s %s (stdio transport).",
        protocol_handler.server_name,
        protocol_handler.server_version,
    )

    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(line_buffering=True)

    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            request = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Invalid JSON received on stdin.")
            _write_response(
                _error_response(None, JSONRPCErrorCodes.PARSE_ERROR, "Parse error")
            )
            continue

        response = handle_request(protocol_handler, request)
        method = request.get("method") if isinstance(request, dict) else None
        if response is not None:
            _write_response(response)
            logger.info("Handled request: %s", method)

        if trace_logger is not None:
            trace_logger.info(
                "request",
                extra={
                    "method": method,
                    "request_id": request.get("id") if isinstance(request, dict) else None,
                    "is_error": _is_error_response(response),
                },
            )

    logger.info("MCP server shutting down.")
    return 0


def main() -> int:
    """Entry point for stdio MCP server."""

    try:
        settings = load_settings(DEFAULT_SETTINGS_PATH)
    except (FileNotFoundError, ValueError) as exc:
        get_logger("moneyworks.server").error("Failed to load settings: %s", exc)
        return 1

    return run_stdio_server(settings)


if __name__ == "__main__":
    raise SystemExit(main())
