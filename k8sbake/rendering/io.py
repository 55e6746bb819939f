"""File I/O operations for baked manifests."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def write_manifest(path: Path, text: str, mode: int = 0o644) -> None:
    """Write a manifest atomically; the target must not already exist.

    Args:
        path: Destination file path
        text: Manifest content, written verbatim
        mode: File permissions (octal)
    """
    ensure_parent(path)
    if path.exists():
        raise FileExistsError(f"Refusing to overwrite existing manifest: {path}")

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            with suppress(OSError):
                os.remove(tmp_name)
