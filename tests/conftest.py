"""Shared pytest fixtures for the classmagic test suite.

Guidelines
----------
* Files are created under ``tmp_path`` only.
* Tests must not depend on OS state beyond their own temp files.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing *content* to ``tmp_path / name`` and returning the path."""

    def _make(content: bytes, name: str = "test.class") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make
