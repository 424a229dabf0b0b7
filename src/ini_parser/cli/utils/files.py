from __future__ import annotations

import os
from pathlib import Path

from ini_parser.core.errors import FileAccessError


def is_file_valid(path: Path) -> bool:
    """True if `path` is an existing, readable regular file."""
    try:
        return path.is_file() and os.access(path, os.R_OK)
    except OSError:
        return False


def read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Cannot read file: {path}", path) from e


def write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(f"Cannot write to file: {path}", path) from e
