"""File I/O operations for compiled pages."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> None:
    """Create ``path`` and any missing parents; no-op when it exists."""
    path.mkdir(parents=True, exist_ok=True)


def read_source(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Create or overwrite ``path`` with ``text`` via a sibling temporary file.

    Args:
        path: Destination file path
        text: Rendered page content
        mode: File permissions (octal)
    """
    ensure_dir(path.parent)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
