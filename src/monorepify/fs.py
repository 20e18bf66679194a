"""Filesystem primitives used by the builders.

Each helper wraps the underlying ``OSError`` into a
:class:`~monorepify.errors.FilesystemOperationError` so the CLI can report
which step broke.  Nothing here retries or rolls back.
"""

from __future__ import annotations

import json
import logging
import shutil
from typing import TYPE_CHECKING, Any

from monorepify.errors import FilesystemOperationError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def mkdirp(path: Path) -> None:
    """Create *path* and any missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemOperationError("create directory", path, exc) from exc


def move(src: Path, dst: Path) -> None:
    """Move a file or directory, creating the destination parent."""
    mkdirp(dst.parent)
    try:
        shutil.move(str(src), str(dst))
    except OSError as exc:
        raise FilesystemOperationError("move", src, exc) from exc
    logger.debug("Moved %s -> %s", src, dst)


def copy(src: Path, dst: Path) -> None:
    """Copy a file or a whole directory tree, overwriting *dst*."""
    mkdirp(dst.parent)
    try:
        if src.is_dir():
            shutil.copytree(src, dst, dirs_exist_ok=True)
        else:
            shutil.copyfile(src, dst)
    except OSError as exc:
        raise FilesystemOperationError("copy", src, exc) from exc
    logger.debug("Copied %s -> %s", src, dst)


def remove(path: Path) -> None:
    """Remove a file or directory tree.  Missing paths are ignored."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
        else:
            return
    except OSError as exc:
        raise FilesystemOperationError("remove", path, exc) from exc
    logger.debug("Removed %s", path)


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FilesystemOperationError("read", path, exc) from exc


def write_text(path: Path, content: str) -> None:
    """Write *content* to *path*, creating parent directories."""
    mkdirp(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemOperationError("write", path, exc) from exc
    logger.debug("Wrote %s", path)


def read_json(path: Path) -> dict[str, Any]:
    """Read a JSON object, keeping the key order of the file."""
    text = read_text(path)
    data: dict[str, Any] = json.loads(text)
    return data


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write *data* as 2-space indented JSON with a trailing newline.

    Keys are written in insertion order, never sorted.
    """
    write_text(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
