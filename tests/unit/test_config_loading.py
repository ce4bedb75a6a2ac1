"""Tests for settings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.core.settings import (
    DEFAULT_SETTINGS_PATH,
    PROJECT_ROOT,
    Settings,
    load_settings,
    resolve_path,
    validate_settings,
)


_MINIMAL_VALID_SETTINGS = """
server:
  name: moneyworks-ai-accountant
  version: 0.1.0
observability:
  log_level: INFO
"""


def _write_yaml(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_settings_valid_yaml_returns_settings(tmp_path: Path) -> None:
    config_path = _write_yaml(tmp_path / "settings.yaml", _MINIMAL_VALID_SETTINGS)

    settings = load_settings(str(config_path))

    assert isinstance(settings, Settings)
    assert settings.server["name"] == "moneyworks-ai-accountant"
    assert settings.observability["log_level"] == "INFO"


def test_load_settings_missing_required_field_raises_readable_error(tmp_path: Path) -> None:
    invalid_yaml = _MINIMAL_VALID_SETTINGS.replace(
        "  name: moneyworks-ai-accountant\n", "", 1
    )
    config_path = _write_yaml(tmp_path / "settings.yaml", invalid_yaml)

    with pytest.raises(ValueError, match=r"server\.name"):
        load_settings(str(config_path))


def test_load_settings_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "absent.yaml"))


def test_load_settings_non_mapping_raises(tmp_path: Path) -> None:
    config_path = _write_yaml(tmp_path / "settings.yaml", "- just\n- a list\n")

    with pytest.raises(ValueError, match="mapping"):
        load_settings(str(config_path))


def test_load_settings_invalid_yaml_raises_value_error(tmp_path: Path) -> None:
    config_path = _write_yaml(tmp_path / "settings.yaml", "server: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_settings(str(config_path))


def test_validate_settings_missing_observability_raises() -> None:
    settings = Settings(
        server={"name": "moneyworks-ai-accountant"},
        observability={},
        raw={"server": {"name": "moneyworks-ai-accountant"}},
    )

    with pytest.raises(ValueError, match="observability"):
        validate_settings(settings)


def test_resolve_path_is_cwd_independent(tmp_path: Path) -> None:
    assert resolve_path("config/settings.yaml") == PROJECT_ROOT / "config" / "settings.yaml"
    assert resolve_path(tmp_path) == tmp_path


def test_shipped_settings_file_is_valid() -> None:
    settings = load_settings(DEFAULT_SETTINGS_PATH)

    assert settings.server["name"] == "moneyworks-ai-accountant"
    assert settings.observability["trace_enabled"] is False
