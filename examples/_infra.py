from __future__ import annotations

import sys
from pathlib import Path
from typing import IO

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fallible import Failure, Result, error, ok  # noqa: E402


class FileNotFound(Failure):
    """Custom errors are optional, plain messages work too."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(file_name)

    def __str__(self) -> str:
        return f"I'm looking for {self.file_name}, where's the file Lebowski????"


def open_file(file_name: str | Path) -> Result[IO[str]]:
    path = Path(file_name)
    if not path.exists():
        return error(FileNotFound(str(path)))
    try:
        return ok(path.open("r+"))
    except OSError:
        return error(f"Something went wrong while trying to open file {path}.")


def read_file(stream: IO[str], size: int = 5) -> Result[str]:
    try:
        return ok(stream.read(size))
    except (OSError, ValueError):
        return error("Couldn't read from stream.")


def close_file(stream: IO[str]) -> Result[bool]:
    try:
        stream.close()
    except OSError:
        return error("Couldn't close file.")
    return ok()


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
