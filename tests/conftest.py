"""Shared fixtures for autohide tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a standard test directory tree.

    Structure::

        root/
        ├── cache/
        │   ├── data.tmp
        │   └── keep.md
        ├── docs/
        │   └── Thumbs.db
        ├── notes.TXT
        ├── README
        └── secret.txt
    """
    (tmp_path / "cache").mkdir()
    (tmp_path / "cache" / "data.tmp").write_text("tmp")
    (tmp_path / "cache" / "keep.md").write_text("keep")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "Thumbs.db").write_bytes(b"\x00")
    (tmp_path / "notes.TXT").write_text("notes")
    (tmp_path / "README").write_text("readme")
    (tmp_path / "secret.txt").write_text("secret")
    return tmp_path


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
