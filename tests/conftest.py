from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def hello_file(tmp_path: Path) -> Path:
    path = tmp_path / "file.txt"
    path.write_text("hello world")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    return tmp_path / "missing.txt"
