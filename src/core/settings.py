"""Settings loading and validation utilities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_SETTINGS_PATH = "config/settings.yaml"


@dataclass(slots=True)
class Settings:
    """Application settings structure.

    Attributes:
        server: MCP server identity (name, version, protocol_version).
        observability: Logging and tracing configuration dictionary.
        raw: Original full settings dictionary.
    """

    server: dict[str, Any]
    observability: dict[str, Any]
    raw: dict[str, Any]


def resolve_path(path: str | Path) -> Path:
    """Resolve *path* against the project root.

    Absolute paths are returned unchanged, so callers get the same file
    regardless of the current working directory.
    """

    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return PROJECT_ROOT / candidate


def _require_path(data: dict[str, Any], dotted_path: str) -> None:
    current: Any = data
    for key in dotted_path.split("."):
        if not isinstance(current, dict) or key not in current:
            raise ValueError(f"Missing required settings field: {dotted_path}")
        current = current[key]


def validate_settings(settings: Settings) -> None:
    """Validate required settings fields.

    Args:
        settings: Parsed settings object.

    Raises:
        ValueError: If any required field is missing.
    """

    required_paths = [
        "server",
        "server.name",
        "observability",
    ]

    for path in required_paths:
        _require_path(settings.raw, path)


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load YAML settings from a file and validate required fields.

    Args:
        path: Path to the YAML settings file. Relative paths are resolved
            against the project root.

    Returns:
        Parsed and validated settings object.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If YAML is invalid or required fields are missing.
    """

    settings_path = resolve_path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as fp:
        try:
            parsed = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in settings file {settings_path}: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ValueError("Settings file must contain a YAML mapping at top level")

    settings = Settings(
        server=parsed.get("server") or {},
        observability=parsed.get("observability") or {},
        raw=parsed,
    )
    validate_settings(settings)
    return settings
