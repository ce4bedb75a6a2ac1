"""MoneyWorks AI Accountant 启动入口。

本模块为 MoneyWorks AI Accountant Framework 的主入口点。
启动时向 stdout 输出两行启动信息，随后正常退出。
MCP Server 通过 ``python -m src.mcp_server.server`` 单独启动。
"""

from __future__ import annotations

from src.core.bootstrap import DEFAULT_EXPORT, main

__all__ = ["DEFAULT_EXPORT", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
