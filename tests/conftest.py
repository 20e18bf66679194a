"""Shared test fixtures for Monorepify."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from monorepify.templates import TemplateProvider

if TYPE_CHECKING:
    from collections.abc import Sequence

    from monorepify.paths import PathRegistry

FIXTURES = Path(__file__).parent / "fixtures"


def _add_dependencies(manifest: Path, key: str, dependencies: Sequence[str]) -> None:
    data = json.loads(manifest.read_text(encoding="utf-8"))
    section = data.setdefault(key, {})
    for dependency in dependencies:
        section[dependency] = "1.42"
    manifest.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


class RecordingRunner:
    """In-memory command runner.

    Records every call and leaves a marker file behind instead of running
    yarn, so the resulting tree can be compared against a fixture.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def add_root_dev_dependencies(self, paths: PathRegistry, dependencies: Sequence[str]) -> None:
        self.calls.append(("add_root_dev_dependencies", list(dependencies)))
        _add_dependencies(paths.root_package, "devDependencies", dependencies)

    def add_docs_dependencies(self, paths: PathRegistry, dependencies: Sequence[str]) -> None:
        self.calls.append(("add_docs_dependencies", list(dependencies)))
        _add_dependencies(paths.docs_path("package.json"), "dependencies", dependencies)

    def unlink(self, directory: Path) -> None:
        self.calls.append(("unlink", directory))
        (directory / "yarn.unlink").write_text("unlink", encoding="utf-8")

    def link(self, directory: Path) -> None:
        self.calls.append(("link", directory))
        (directory / "yarn.link").write_text("link", encoding="utf-8")

    def site_init(self, paths: PathRegistry) -> None:
        """Mimic the files ``norska init`` leaves in ``docs/``."""
        self.calls.append(("site_init", paths.docs))
        paths.docs_path("norska.init").write_text("norska init", encoding="utf-8")
        scripts = paths.docs_path("scripts")
        scripts.mkdir(parents=True, exist_ok=True)
        (scripts / "build").write_text("dummy script", encoding="utf-8")
        netlify = TemplateProvider().get_template("docs/netlify.toml")
        paths.docs_path("netlify.toml").write_text(netlify, encoding="utf-8")
        src = paths.docs_path("src")
        src.mkdir(parents=True, exist_ok=True)
        (src / "index.pug").touch()

    def regenerate_readme(self, paths: PathRegistry) -> None:
        self.calls.append(("regenerate_readme", paths.root))
        paths.root_path("aberlaas.readme").write_text("aberlaas readme", encoding="utf-8")

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def fixture_project(tmp_path: Path) -> Path:
    """Copy of ``fixtures/input``: a single-package project."""
    project = tmp_path / "project"
    shutil.copytree(FIXTURES / "input", project)
    return project


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal project with only a manifest and a README."""
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "tiny", "version": "0.1.0", "description": "Tiny lib"}),
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("# tiny\n\nHello.\n", encoding="utf-8")
    return tmp_path
