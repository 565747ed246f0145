"""Shared test fixtures."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

ASSET_MTIME = 1000


def _write_asset(
    base: Path,
    relative: str,
    content: str = "",
    mtime: int = ASSET_MTIME,
) -> Path:
    path = base / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def write_asset() -> Callable[..., Path]:
    """Return a helper that creates an asset file with a pinned modification time."""
    return _write_asset


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    """Create a static directory with a few assets, all with mtime 1000."""
    static = tmp_path / "static"
    _write_asset(static, "css/app.css", "body { color: red; }")
    _write_asset(static, "app.css", "p { margin: 0; }")
    _write_asset(static, "js/app.js", "console.log('hi');")
    _write_asset(static, "js/vendor/lib.min.js", "var lib;")
    _write_asset(static, "README")
    _write_asset(static, ".htaccess")
    return static
