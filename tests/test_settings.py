"""Tests for monorepify.settings: defaults and .monorepify.yml overrides."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import yaml

from monorepify.errors import SettingsError
from monorepify.settings import SETTINGS_FILE, Settings, load_settings

if TYPE_CHECKING:
    from pathlib import Path


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.org == "pixelastic"
        assert settings.default_license == "MIT"

    def test_homepage_for(self) -> None:
        assert Settings().homepage_for("foo") == "https://projects.pixelastic.com/foo/"

    def test_repository_for(self) -> None:
        assert Settings(org="acme").repository_for("foo") == "acme/foo"


class TestLoadSettings:
    def test_no_file(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path) == Settings()

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / SETTINGS_FILE).write_text("")
        assert load_settings(tmp_path) == Settings()

    def test_overrides(self, tmp_path: Path) -> None:
        (tmp_path / SETTINGS_FILE).write_text(
            yaml.dump({"org": "acme", "twitter": "acme_dev"})
        )
        settings = load_settings(tmp_path)
        assert settings.org == "acme"
        assert settings.twitter == "acme_dev"
        assert settings.author == Settings().author

    def test_unknown_key_warns(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / SETTINGS_FILE).write_text("colour: blue\norg: acme\n")
        with caplog.at_level(logging.WARNING, logger="monorepify.settings"):
            settings = load_settings(tmp_path)
        assert settings.org == "acme"
        assert "colour" in caplog.text

    def test_toolchain_not_configurable(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / SETTINGS_FILE).write_text("tool_package: devkit\n")
        with caplog.at_level(logging.WARNING, logger="monorepify.settings"):
            assert load_settings(tmp_path) == Settings()
        assert "tool_package" in caplog.text

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        (tmp_path / SETTINGS_FILE).write_text("- a\n- b\n")
        with pytest.raises(SettingsError, match="mapping"):
            load_settings(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / SETTINGS_FILE).write_text("org: [unclosed\n")
        with pytest.raises(SettingsError):
            load_settings(tmp_path)
