"""File helpers: copying, and reading and writing whole files."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def copy_file(source: PathLike, destination: PathLike, overwrite: bool = True) -> bool:
    """Copy a file; return False if it was skipped because the destination exists."""
    if not overwrite and Path(destination).exists():
        return False
    shutil.copyfile(source, destination)
    return True


def read_file(path: PathLike) -> bytes:
    """Read a whole file as bytes."""
    return Path(path).read_bytes()


def read_text_file(path: PathLike) -> str:
    """Read a whole file as UTF-8 text."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def write_file(path: PathLike, text: str) -> None:
    """Write ``text`` to a file, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)