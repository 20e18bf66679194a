"""External command gateway: the only place that shells out.

The rest of the pipeline talks to a :class:`CommandRunner`.  Production
code uses :class:`ShellCommandRunner`; tests pass a recorder implementing
the same protocol so no package manager ever runs.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING, Protocol

from monorepify.errors import ExternalCommandError
from monorepify.settings import SITE_GENERATOR, TOOL_PACKAGE

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from monorepify.paths import PathRegistry

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Operations delegated to yarn and the site generator."""

    def add_root_dev_dependencies(self, paths: PathRegistry, dependencies: Sequence[str]) -> None:
        """Add *dependencies* as devDependencies of the workspace root."""
        ...

    def add_docs_dependencies(self, paths: PathRegistry, dependencies: Sequence[str]) -> None:
        """Add *dependencies* to the docs workspace."""
        ...

    def unlink(self, directory: Path) -> None:
        """Remove the global link registration of the package in *directory*."""
        ...

    def link(self, directory: Path) -> None:
        """Register the package in *directory* as a global link."""
        ...

    def site_init(self, paths: PathRegistry) -> None:
        """Scaffold the static site inside the docs workspace."""
        ...

    def regenerate_readme(self, paths: PathRegistry) -> None:
        """Regenerate the README files from the docs content."""
        ...


class ShellCommandRunner:
    """Run the real ``yarn`` commands, failing on any non-zero exit."""

    def __init__(self, *, executable: str = "yarn") -> None:
        self.executable = executable

    def _run(self, args: Sequence[str], cwd: Path, *, interactive: bool = False) -> None:
        command = [self.executable, *args]
        logger.info("$ %s  (in %s)", " ".join(command), cwd)
        try:
            result = subprocess.run(  # noqa: S603
                command,
                cwd=str(cwd),
                stdin=None if interactive else subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            raise ExternalCommandError(command, None, str(exc)) from exc
        if result.returncode != 0:
            raise ExternalCommandError(command, result.returncode)

    def add_root_dev_dependencies(self, paths: PathRegistry, dependencies: Sequence[str]) -> None:
        self._run(["add", "--dev", "-W", *dependencies], paths.root)

    def add_docs_dependencies(self, paths: PathRegistry, dependencies: Sequence[str]) -> None:
        self._run(["add", *dependencies], paths.docs)

    def unlink(self, directory: Path) -> None:
        self._run(["unlink"], directory)

    def link(self, directory: Path) -> None:
        self._run(["link"], directory)

    def site_init(self, paths: PathRegistry) -> None:
        # Inherits the terminal's stdin: the generator asks questions.
        self._run(["run", SITE_GENERATOR, "init"], paths.docs, interactive=True)

    def regenerate_readme(self, paths: PathRegistry) -> None:
        self._run(["run", TOOL_PACKAGE, "readme"], paths.root)
