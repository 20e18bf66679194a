"""Path registry: resolved workspace locations for a single run."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from monorepify.errors import ManifestNotFoundError

MANIFEST = "package.json"


@dataclass(frozen=True)
class PathRegistry:
    """Root, workspace directories and project identity.

    Built once by :meth:`init` at the start of a run and handed to every
    component.  Nothing mutates it afterwards.
    """

    root: Path
    lib: Path
    docs: Path
    bin: Path
    name: str
    version: str

    @classmethod
    def init(cls, user_root: str | Path | None = None) -> PathRegistry:
        """Resolve *user_root* (default: cwd) and read the project identity.

        Raises
        ------
        ManifestNotFoundError
            When ``<root>/package.json`` is missing, unreadable, or lacks a
            ``name`` or ``version``.
        """
        root = Path(user_root or ".").resolve()
        manifest_path = root / MANIFEST
        if not manifest_path.is_file():
            raise ManifestNotFoundError(manifest_path)

        try:
            data = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ManifestNotFoundError(manifest_path, f"unreadable package.json ({exc})") from exc

        if not isinstance(data, dict):
            raise ManifestNotFoundError(manifest_path, "package.json is not an object")
        name = data.get("name")
        version = data.get("version")
        if not name or not version:
            raise ManifestNotFoundError(manifest_path, "package.json needs a name and a version")

        return cls(
            root=root,
            lib=root / "lib",
            docs=root / "docs",
            bin=root / "bin",
            name=str(name),
            version=str(version),
        )

    def root_path(self, relative: str = "") -> Path:
        return self.root / relative

    def lib_path(self, relative: str = "") -> Path:
        return self.lib / relative

    def docs_path(self, relative: str = "") -> Path:
        return self.docs / relative

    @property
    def root_package(self) -> Path:
        return self.root / MANIFEST

    @property
    def lib_package(self) -> Path:
        return self.lib / MANIFEST

    def relative(self, path: Path) -> str:
        """Return *path* relative to the root, POSIX style."""
        return path.relative_to(self.root).as_posix()
