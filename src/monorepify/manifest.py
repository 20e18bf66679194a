"""Rescope the project manifest into the ``lib`` workspace.

The original ``package.json`` moves to ``lib/package.json``.  Paths that
pointed into ``lib/`` now point at the workspace itself, script commands
reach one level up into the shared ``scripts/lib/`` folder, and the
identity fields are stamped from :class:`~monorepify.settings.Settings`.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from monorepify import fs
from monorepify.settings import TOOL_PACKAGE

if TYPE_CHECKING:
    from monorepify.commands import CommandRunner
    from monorepify.paths import PathRegistry
    from monorepify.settings import Settings

logger = logging.getLogger(__name__)

LIB_PREFIX = "lib/"

# Output order of the rescoped manifest.  Unknown keys follow, in the
# order they had in the source manifest.
KEY_ORDER: tuple[str, ...] = (
    # Metadata
    "name",
    "description",
    "version",
    "repository",
    "homepage",
    "author",
    "license",
    # Package content
    "main",
    "files",
    "bin",
    "dependencies",
    # Dev
    "engines",
    "devDependencies",
    "scripts",
)

# A relative "./scripts/" not already part of a longer path.
_SCRIPTS_RE = re.compile(r"(?<![\w./])\./scripts/")

# The registry derives bug tracker URLs from the repository shorthand.
DROPPED_KEYS: frozenset[str] = frozenset({"bugs"})


# ---------------------------------------------------------------------------
# Field rewriters
# ---------------------------------------------------------------------------


def strip_lib_prefix(value: str) -> str:
    """``"lib/index.js"`` -> ``"index.js"``; other values are unchanged."""
    if value.startswith(LIB_PREFIX):
        return value[len(LIB_PREFIX) :]
    return value


def rewrite_files(files: list[str] | None) -> list[str] | None:
    if files is None:
        return None
    return [strip_lib_prefix(entry) for entry in files]


def rewrite_scripts(scripts: dict[str, str] | None) -> dict[str, str] | None:
    """Point ``./scripts/`` references at the shared ``../scripts/lib/``."""
    if scripts is None:
        return None
    return {key: _SCRIPTS_RE.sub("../scripts/lib/", command) for key, command in scripts.items()}


def without_dev_dependency(
    dev_dependencies: dict[str, str] | None,
    package: str,
) -> dict[str, str] | None:
    """Drop *package*; return ``None`` instead of an empty mapping."""
    if not dev_dependencies:
        return None
    remaining = {key: value for key, value in dev_dependencies.items() if key != package}
    return remaining or None


def order_manifest(data: dict[str, Any]) -> dict[str, Any]:
    """Return *data* with :data:`KEY_ORDER` keys first, then the rest in order.

    Only :data:`DROPPED_KEYS` are removed; ``None`` (JSON ``null``) values
    are kept.
    """
    ordered: dict[str, Any] = {key: data[key] for key in KEY_ORDER if key in data}
    for key, value in data.items():
        if key in ordered or key in DROPPED_KEYS:
            continue
        ordered[key] = value
    return ordered


def rescope_manifest(data: dict[str, Any], settings: Settings) -> dict[str, Any]:
    """Return the ``lib`` workspace version of the manifest *data*.

    *data* itself is not modified.
    """
    name = str(data["name"])
    rescoped = dict(data)

    main = rescoped.get("main")
    if isinstance(main, str):
        rescoped["main"] = strip_lib_prefix(main)
    if "files" in rescoped:
        rescoped["files"] = rewrite_files(rescoped["files"])
    if "scripts" in rescoped:
        rescoped["scripts"] = rewrite_scripts(rescoped["scripts"])
    dev_dependencies = without_dev_dependency(rescoped.get("devDependencies"), TOOL_PACKAGE)
    if dev_dependencies is None:
        rescoped.pop("devDependencies", None)
    else:
        rescoped["devDependencies"] = dev_dependencies

    rescoped["repository"] = settings.repository_for(name)
    rescoped["homepage"] = settings.homepage_for(name)
    rescoped["author"] = settings.author
    if not rescoped.get("license"):
        rescoped["license"] = settings.default_license

    return order_manifest(rescoped)


# ---------------------------------------------------------------------------
# Workspace step
# ---------------------------------------------------------------------------


def rescope_package_to_lib(
    paths: PathRegistry,
    settings: Settings,
    runner: CommandRunner,
) -> dict[str, Any]:
    """Move ``package.json`` (and ``bin/``) into ``lib/`` and rewrite it.

    The root loses its manifest: later steps must read
    ``paths.lib_package``.  Returns the written manifest.
    """
    # The link registered for the root now belongs to lib/.
    runner.unlink(paths.root)

    fs.mkdirp(paths.lib)
    fs.move(paths.root_package, paths.lib_package)
    if paths.bin.is_dir():
        logger.info("Moving bin/ to lib/bin/")
        fs.move(paths.bin, paths.lib_path("bin"))

    data = rescope_manifest(fs.read_json(paths.lib_package), settings)
    fs.write_json(paths.lib_package, data)
    logger.info("Rescoped %s into %s", paths.name, paths.relative(paths.lib_package))

    runner.link(paths.lib)
    return data
