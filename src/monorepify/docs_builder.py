"""Documentation workspace: norska site scaffold fed from the README."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from monorepify import fs
from monorepify.settings import SITE_GENERATOR, SITE_THEME
from monorepify.templates import fill

if TYPE_CHECKING:
    from monorepify.commands import CommandRunner
    from monorepify.paths import PathRegistry
    from monorepify.settings import Settings
    from monorepify.templates import TemplateProvider

logger = logging.getLogger(__name__)

_PUBLISH_RE = re.compile(r"^\s*publish =")
PUBLISH_LINE = '  publish = "docs/dist/"'


# ---------------------------------------------------------------------------
# Content helpers
# ---------------------------------------------------------------------------


def rewrite_publish_dir(toml: str) -> str:
    """Point every ``publish =`` line at the docs build output.

    Plain line matching: a config without such a line comes back unchanged.
    """
    lines = [PUBLISH_LINE if _PUBLISH_RE.match(line) else line for line in toml.split("\n")]
    return "\n".join(lines)


def strip_heading(readme: str, name: str) -> str:
    """Remove a first line reading exactly ``# <name>``.

    Only the heading text goes; the line break after it stays so the
    paragraph spacing of the rest is preserved.
    """
    heading = f"# {name}"
    first_line = readme.split("\n", 1)[0]
    if first_line.rstrip("\r") == heading:
        return readme[len(heading) :]
    return readme


def build_index_page(template: str, *, name: str, description: str, readme: str) -> str:
    """Fill the index page template and drop blank runs left by empty values."""
    content = fill(
        template, name=name, description=description, readme=strip_heading(readme, name)
    )
    return content.replace("\n\n\n", "\n")


def build_site_meta(name: str, description: str, settings: Settings) -> dict[str, Any]:
    """Site metadata consumed by the docs theme (``src/_data/meta.json``)."""
    return {
        "title": name,
        "description": description,
        "productionUrl": settings.homepage_for(name),
        "twitter": settings.twitter,
    }


# ---------------------------------------------------------------------------
# Workspace step
# ---------------------------------------------------------------------------


def _write_docs_package(paths: PathRegistry, templates: TemplateProvider) -> None:
    docs_package = templates.get_template("docs/package.json")
    docs_package["name"] = fill(docs_package["name"], name=paths.name)
    docs_package["version"] = paths.version
    fs.write_json(paths.docs_path("package.json"), docs_package)


def _move_netlify_config(paths: PathRegistry, templates: TemplateProvider) -> None:
    docs_toml = paths.docs_path("netlify.toml")
    if docs_toml.is_file():
        source = fs.read_text(docs_toml)
    else:
        logger.warning("Site init produced no netlify.toml, using the bundled one")
        source = templates.get_template("docs/netlify.toml")

    if not any(_PUBLISH_RE.match(line) for line in source.split("\n")):
        logger.warning("No publish directive found in netlify.toml, copied as is")
    fs.write_text(paths.root_path("netlify.toml"), rewrite_publish_dir(source))
    fs.remove(docs_toml)


def _write_index_page(
    paths: PathRegistry,
    templates: TemplateProvider,
    description: str,
) -> None:
    readme_path = paths.root_path("README.md")
    readme = fs.read_text(readme_path) if readme_path.is_file() else ""
    if not readme:
        logger.warning("No README.md content to move into the docs index")
    index = build_index_page(
        templates.get_template("docs/src/index.md"),
        name=paths.name,
        description=description,
        readme=readme,
    )
    fs.write_text(paths.docs_path("src/index.md"), index)


def create_docs_workspace(
    paths: PathRegistry,
    settings: Settings,
    templates: TemplateProvider,
    runner: CommandRunner,
) -> None:
    """Create ``docs/``, initialise the site and move the README into it.

    Reads the description from ``lib/package.json``, so the manifest must
    already be rescoped.
    """
    fs.mkdirp(paths.docs)
    _write_docs_package(paths, templates)
    runner.add_docs_dependencies(paths, [SITE_GENERATOR, SITE_THEME])

    runner.site_init(paths)

    # Root scripts/ already covers the docs workspace.
    fs.remove(paths.docs_path("scripts"))
    fs.copy(
        templates.template_path("docs/norska.config.js"),
        paths.docs_path("norska.config.js"),
    )

    description = str(fs.read_json(paths.lib_package).get("description") or "")
    fs.write_json(
        paths.docs_path("src/_data/meta.json"),
        build_site_meta(paths.name, description, settings),
    )
    fs.copy(
        templates.template_path("docs/src/_data/theme.js"),
        paths.docs_path("src/_data/theme.js"),
    )

    _move_netlify_config(paths, templates)
    _write_index_page(paths, templates, description)
    logger.info("Moved README.md into %s", paths.relative(paths.docs_path("src/index.md")))

    fs.remove(paths.root_path("README.md"))
    fs.remove(paths.lib_path("README.md"))
    fs.remove(paths.docs_path("src/index.pug"))

    runner.regenerate_readme(paths)
