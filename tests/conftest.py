from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure repo root is importable when running pytest from any CWD.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from math3d.points import Point  # noqa: E402


@pytest.fixture
def origin() -> Point:
    return Point(0.0, 0.0, 0.0)


@pytest.fixture
def unit_corner() -> Point:
    return Point(1.0, 1.0, 1.0)


@pytest.fixture(autouse=True)
def _clear_math3d_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MATH3D_PRECISION", "MATH3D_FORMAT", "MATH3D_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
