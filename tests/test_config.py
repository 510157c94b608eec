"""Tests for environment-driven settings."""

from __future__ import annotations

from dbstrings.config import LocalizationSettings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DBSTRINGS_AUTO_CREATE_MISSING", "true")
    monkeypatch.setenv("DBSTRINGS_RESOURCES_PATH", "Resources")
    monkeypatch.setenv("DBSTRINGS_DATABASE__DSN", "sqlite:///:memory:")
    monkeypatch.setenv("DBSTRINGS_RESOURCE_LOCATIONS", '{"shop": "i18n"}')

    settings = LocalizationSettings(_env_file=None)

    assert settings.auto_create_missing is True
    assert settings.database.dsn == "sqlite:///:memory:"
    assert settings.resource_subpath_for("shop") == "i18n"
    assert settings.resource_subpath_for("billing") == "Resources"
    assert settings.root_namespace_for("shop") == "shop"


def test_blank_resources_path_means_none(monkeypatch):
    monkeypatch.setenv("DBSTRINGS_RESOURCES_PATH", " ")

    settings = LocalizationSettings(_env_file=None)

    assert settings.resources_path is None
    assert settings.auto_create_missing is False
    assert settings.default_locale == "en"
