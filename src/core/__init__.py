"""
Core Layer - Framework bootstrap and configuration.

This package contains:
- Startup banner and default export (bootstrap.py)
- Configuration management (settings.py)
"""

__all__ = []
