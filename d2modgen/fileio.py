"""Whole-file reading and writing and directory helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_file(filename: PathLike) -> bytes:
    """Return the whole content of a file; raises OSError when it cannot be read."""
    return Path(filename).read_bytes()


def write_file(filename: PathLike, data: bytes | str) -> None:
    """Replace the file's content with ``data``; text is written as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    with open(filename, "wb") as handle:
        handle.write(data)


def create_directories(folder: PathLike) -> None:
    """Create ``folder`` and its parents unless the path already exists."""
    path = Path(folder)
    if path.exists():
        return
    path.mkdir(parents=True, exist_ok=True)


def create_directories_for_file(filename: PathLike) -> None:
    """Create the directory that will hold ``filename``."""
    create_directories(Path(filename).parent)


def ensure_trailing_slash(path: str) -> str:
    """Append '/' unless the path is empty or already ends with a separator."""
    if not path:
        return ""
    if path.endswith(("\\", "/")):
        return path
    return path + "/"