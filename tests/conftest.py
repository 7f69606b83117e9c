"""Pytest configuration and fixtures for Datavalida tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datavalida can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datavalida._internal import clock  # noqa: E402

PINNED_TODAY: tuple[int, int, int] = (2025, 6, 15)


@pytest.fixture
def pinned_today(monkeypatch: pytest.MonkeyPatch) -> tuple[int, int, int]:
    """Pin the system clock to 2025-06-15."""
    monkeypatch.setattr(clock, "system_today", lambda: PINNED_TODAY)
    return PINNED_TODAY
