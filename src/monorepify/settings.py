"""Identity settings, optionally overridden by ``.monorepify.yml``."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import yaml

from monorepify.errors import SettingsError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".monorepify.yml"

# Packages the bundled templates call into (scripts/, lerna.json,
# docs/norska.config.js).  Not configurable: the templates hardcode them.
TOOL_PACKAGE = "aberlaas"
ORCHESTRATOR_PACKAGE = "lerna"
SITE_GENERATOR = "norska"
SITE_THEME = "norska-theme-docs"


@dataclass(frozen=True)
class Settings:
    """Constants stamped into the generated manifests and site metadata."""

    org: str = "pixelastic"
    homepage: str = "https://projects.pixelastic.com/{name}/"
    author: str = "Tim Carry (@pixelastic)"
    twitter: str = "pixelastic"
    default_license: str = "MIT"

    def homepage_for(self, name: str) -> str:
        return self.homepage.replace("{name}", name)

    def repository_for(self, name: str) -> str:
        return f"{self.org}/{name}"


def load_settings(project_root: Path) -> Settings:
    """Load settings from ``<project_root>/.monorepify.yml`` if present.

    Unknown keys are ignored with a warning.  Values are coerced to
    strings since every setting is a plain identifier or URL pattern.

    Raises
    ------
    SettingsError
        When the file is not valid YAML or not a mapping.
    """
    path = project_root / SETTINGS_FILE
    if not path.is_file():
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise SettingsError(msg) from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise SettingsError(msg)

    known = {f.name for f in dataclasses.fields(Settings)}
    overrides: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r in %s", key, path)
            continue
        overrides[key] = str(value)

    logger.debug("Loaded settings overrides: %s", sorted(overrides))
    return Settings(**overrides)
