"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def post_file(tmp_path: Path) -> Path:
    """Create a post with title front matter in tmp_path."""
    path = tmp_path / "2024-01-15-hello-world.md"
    path.write_text("---\nlayout: post\ntitle: Hello, World! 2024\n---\n\nFirst paragraph.\n")
    return path


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from tmp_path so config discovery ignores the real tree."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
