"""Pytest configuration and fixtures for filetree tests."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small project tree and return its canonical root.

    Layout::

        root/
        ├── a.txt          (5 bytes)
        ├── .env
        ├── sub/
        │   └── b.txt
        ├── .hidden/
        │   └── secret.txt
        └── node_modules/
            └── pkg.js
    """
    root = (tmp_path / "root").resolve()
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / ".env").write_text("X=1")
    (root / "sub").mkdir()
    (root / "sub" / "b.txt").write_text("b")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "secret.txt").write_text("s")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "pkg.js").write_text("js")
    return root
