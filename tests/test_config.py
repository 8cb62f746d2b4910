from __future__ import annotations

import importlib

import pytest

import config.production as production
from config import get_settings_module

FLAGS = ("REQUIRE_PASSWORD_MATCH", "REPORT_AUTHORIZATION_ERRORS", "ENFORCE_ENROLLMENT")


@pytest.fixture(autouse=True)
def _restore_production():
    yield
    importlib.reload(production)


def test_production_keeps_lenient_defaults(monkeypatch):
    for name in FLAGS:
        monkeypatch.delenv(name, raising=False)

    settings = importlib.reload(production)

    assert (
        settings.REQUIRE_PASSWORD_MATCH,
        settings.REPORT_AUTHORIZATION_ERRORS,
        settings.ENFORCE_ENROLLMENT,
    ) == (False, False, False)


def test_production_flags_can_be_enabled_from_env(monkeypatch):
    for name in FLAGS:
        monkeypatch.setenv(name, "1")

    settings = importlib.reload(production)

    assert settings.REQUIRE_PASSWORD_MATCH is True
    assert settings.REPORT_AUTHORIZATION_ERRORS is True
    assert settings.ENFORCE_ENROLLMENT is True


@pytest.mark.parametrize(
    "env, module",
    [("prod", "config.production"), ("testing", "config.testing"), ("whatever", "config.development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module
