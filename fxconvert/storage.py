"""Small file helpers used by the cache."""

from __future__ import annotations

import os
from pathlib import Path


class StorageError(Exception):
    """Raised when a file cannot be created, read or written."""


def read_file(path: str | os.PathLike[str]) -> bytes | None:
    """Return the file's bytes, or None when it is empty.

    A missing file is created empty.
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except FileNotFoundError:
        try:
            file_path.touch()
        except OSError as exc:
            raise StorageError(f"failed to create file {file_path}: {exc}") from exc
        return None
    except OSError as exc:
        raise StorageError(f"failed to read file {file_path}: {exc}") from exc
    return data or None


def save_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Write bytes to the file, replacing its contents."""
    file_path = Path(path)
    try:
        file_path.write_bytes(data)
    except OSError as exc:
        raise StorageError(f"failed to write to file {file_path}: {exc}") from exc