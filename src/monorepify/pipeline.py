"""Run the whole conversion: lib rescope, monorepo root, docs workspace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from monorepify.commands import ShellCommandRunner
from monorepify.docs_builder import create_docs_workspace
from monorepify.manifest import rescope_package_to_lib
from monorepify.paths import PathRegistry
from monorepify.root_builder import create_monorepo_root
from monorepify.settings import load_settings
from monorepify.templates import TemplateProvider

if TYPE_CHECKING:
    from pathlib import Path

    from monorepify.commands import CommandRunner
    from monorepify.settings import Settings

logger = logging.getLogger(__name__)

_SKIPPED_DIRS = frozenset({".git", "node_modules"})


@dataclass
class RunResult:
    """Summary of a finished conversion.

    ``files`` lists every file of the converted tree, relative to ``root``
    (``.git`` and ``node_modules`` excluded), untouched sources included.
    """

    name: str
    version: str
    root: Path
    files: list[str] = field(default_factory=list)


def _list_files(root: Path) -> list[str]:
    files = (p.relative_to(root) for p in root.rglob("*") if p.is_file())
    return sorted(p.as_posix() for p in files if not _SKIPPED_DIRS.intersection(p.parts))


def run(
    user_root: str | Path | None = None,
    *,
    runner: CommandRunner | None = None,
    settings: Settings | None = None,
    templates: TemplateProvider | None = None,
) -> RunResult:
    """Convert the project at *user_root* into a monorepo.

    Parameters
    ----------
    user_root:
        Project directory (default: current directory).
    runner:
        External command gateway.  Defaults to :class:`ShellCommandRunner`.
    settings:
        Identity settings.  Defaults to ``<root>/.monorepify.yml`` or the
        built-in values.
    templates:
        Template provider.  Defaults to the bundled templates.

    Raises
    ------
    MonorepifyError
        On the first failure.  Steps already done are not rolled back.
    """
    paths = PathRegistry.init(user_root)
    settings = settings or load_settings(paths.root)
    templates = templates or TemplateProvider()
    runner = runner or ShellCommandRunner()

    logger.info("Converting %s@%s in %s", paths.name, paths.version, paths.root)

    logger.info("[1/3] Rescoping package.json into lib/")
    rescope_package_to_lib(paths, settings, runner)

    logger.info("[2/3] Creating the monorepo root")
    create_monorepo_root(paths, settings, templates, runner)

    logger.info("[3/3] Creating the docs workspace")
    create_docs_workspace(paths, settings, templates, runner)

    return RunResult(
        name=paths.name,
        version=paths.version,
        root=paths.root,
        files=_list_files(paths.root),
    )
