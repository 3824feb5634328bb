"""Pytest configuration and shared fixtures."""

import json

import pytest

from icu_validator.config import reset_settings
from icu_validator.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test.

    This ensures that environment variable changes made by monkeypatch
    are properly reflected in the settings, since pydantic-settings
    reads env vars at instantiation time.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Route structlog through stdlib logging so pytest captures it."""
    setup_logging()


@pytest.fixture(autouse=True)
def isolate_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory so a local .env is never read."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def locales_dir(tmp_path):
    """Directory with one valid and one invalid locale file."""
    directory = tmp_path / "locales"
    directory.mkdir()
    _write_json(
        directory / "en.json",
        {"greeting": "Hello {name}", "menu": {"open": "Open {file}"}},
    )
    _write_json(
        directory / "fr.json",
        {"greeting": "Bonjour {name}", "menu": {"open": "Ouvrir {file"}},
    )
    (directory / "notes.txt").write_text("not a locale", encoding="utf-8")
    return directory
