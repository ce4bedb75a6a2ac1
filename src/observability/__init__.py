"""
Observability Layer - Logging and request tracing.

This package contains observability components:
- Human-readable stderr logger
- JSON Lines trace logger
"""

__all__ = []
