"""Monorepo root: workspace manifest, lerna config and shared scripts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from monorepify import fs
from monorepify.settings import ORCHESTRATOR_PACKAGE, TOOL_PACKAGE
from monorepify.templates import fill

if TYPE_CHECKING:
    from monorepify.commands import CommandRunner
    from monorepify.paths import PathRegistry
    from monorepify.settings import Settings
    from monorepify.templates import TemplateProvider

logger = logging.getLogger(__name__)

# Root manifest fields that carry a ``{name}`` placeholder.
NAMED_FIELDS = ("name", "description")


def create_monorepo_root(
    paths: PathRegistry,
    settings: Settings,
    templates: TemplateProvider,
    runner: CommandRunner,
) -> None:
    """Write the root ``package.json`` and ``lerna.json``, replace ``scripts/``.

    Must run after the original manifest moved to ``lib/``: the root
    ``package.json`` is overwritten.
    """
    root_package = templates.get_template("package.json")
    for key in NAMED_FIELDS:
        if isinstance(root_package.get(key), str):
            root_package[key] = fill(root_package[key], name=paths.name)
    root_package["homepage"] = settings.homepage_for(paths.name)
    fs.write_json(paths.root_package, root_package)
    logger.info("Wrote root %s", paths.relative(paths.root_package))

    runner.add_root_dev_dependencies(paths, [ORCHESTRATOR_PACKAGE, TOOL_PACKAGE])

    lerna_config = templates.get_template("lerna.json")
    lerna_config["version"] = paths.version
    fs.write_json(paths.root_path("lerna.json"), lerna_config)
    logger.info("Wrote lerna.json at version %s", paths.version)

    scripts_dir = paths.root_path("scripts")
    fs.remove(scripts_dir)
    fs.copy(templates.template_path("scripts"), scripts_dir)
    logger.info("Replaced scripts/ with the bundled scripts")
