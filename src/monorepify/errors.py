"""Error taxonomy.

Every failure is fatal: the pipeline mutates the project layout
destructively and never retries or rolls back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class MonorepifyError(Exception):
    """Base class for all errors raised while converting a project."""


class ManifestNotFoundError(MonorepifyError):
    """Raised when the target root has no usable ``package.json``."""

    def __init__(self, path: Path, reason: str = "no package.json found") -> None:
        self.path = path
        super().__init__(f"{reason}: {path}")


class TemplateMissingError(MonorepifyError):
    """Raised when a bundled template is absent (broken installation)."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Template not found: {path}")


class FilesystemOperationError(MonorepifyError):
    """Raised when a move, copy, remove, read or write fails."""

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot {operation} {path}: {cause.strerror or cause}")


class ExternalCommandError(MonorepifyError):
    """Raised when a shelled-out tool exits non-zero or cannot be started."""

    def __init__(self, command: Sequence[str], returncode: int | None, detail: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        joined = " ".join(self.command)
        if returncode is None:
            msg = f"Cannot run `{joined}`"
        else:
            msg = f"`{joined}` exited with code {returncode}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class SettingsError(MonorepifyError):
    """Raised when ``.monorepify.yml`` cannot be parsed."""
