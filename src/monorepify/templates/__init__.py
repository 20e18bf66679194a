"""Bundled template files and the provider that reads them.

The non-Python files in this package directory are the templates
themselves, keyed by their path relative to it.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from monorepify.errors import TemplateMissingError

TEMPLATE_ROOT = Path(__file__).resolve().parent

_TOKEN_RE = re.compile(r"\{(\w+)\}")


class TemplateProvider:
    """Read-only access to the template directory."""

    def __init__(self, root: Path = TEMPLATE_ROOT) -> None:
        self.root = root

    def template_path(self, relative: str = "") -> Path:
        """Resolve *relative* inside the template root.

        Raises
        ------
        TemplateMissingError
            When nothing exists at the resolved path.
        """
        path = self.root / relative
        if not path.exists():
            raise TemplateMissingError(path)
        return path

    def get_template(self, relative: str) -> Any:
        """Return a JSON template as a dict, anything else as raw text."""
        path = self.template_path(relative)
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".json":
            return json.loads(text)
        return text


def fill(text: str, **tokens: str) -> str:
    """Replace every ``{token}`` occurrence in *text* in a single pass.

    Unknown tokens and other braces (JavaScript, TOML) are left as is, and
    substituted values are never scanned for further tokens.
    """
    return _TOKEN_RE.sub(lambda match: tokens.get(match.group(1), match.group(0)), text)
