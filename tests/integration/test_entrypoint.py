"""Integration tests for the framework entry point."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.mark.integration
def test_main_prints_banner_and_exits_cleanly() -> None:
    """Running main.py prints exactly the two banner lines and exits 0."""

    proc = subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "main.py")],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=PROJECT_ROOT,
        timeout=30,
    )

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == (
        "🚀 MoneyWorks AI Accountant Framework\n"
        "📊 Initializing business intelligence layer...\n"
    )


@pytest.mark.integration
def test_main_does_not_need_settings(tmp_path: Path) -> None:
    """The banner does not depend on the working directory or config files."""

    proc = subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "main.py")],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=tmp_path,
        timeout=30,
    )

    assert proc.returncode == 0, proc.stderr
    assert len(proc.stdout.splitlines()) == 2
