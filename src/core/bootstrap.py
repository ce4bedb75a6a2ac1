"""Framework startup banner and default export.

Running the framework entry point writes the two banner lines below to
stdout, in order, and nothing else. ``DEFAULT_EXPORT`` is the module's
default value: an empty, read-only structure with no fields.
"""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Any, Mapping, Optional, TextIO, Tuple


FRAMEWORK_NAME = "MoneyWorks AI Accountant Framework"

BANNER_LINES: Tuple[str, ...] = (
    f"🚀 {FRAMEWORK_NAME}",
    "📊 Initializing business intelligence layer...",
)

DEFAULT_EXPORT: Mapping[str, Any] = MappingProxyType({})


def _ensure_utf8(stream: TextIO) -> None:
    # Windows consoles default to a code page that cannot encode the emoji
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8", errors="replace")


def print_banner(stream: Optional[TextIO] = None) -> None:
    """Write the startup banner, one line per entry of ``BANNER_LINES``.

    Args:
        stream: Output stream. Defaults to ``sys.stdout``.
    """

    out = stream if stream is not None else sys.stdout
    _ensure_utf8(out)
    for line in BANNER_LINES:
        out.write(line + "\n")
    out.flush()


def main() -> int:
    """Print the startup banner.

    Returns:
        Exit code.
    """

    print_banner()
    return 0
