"""Unit tests for ResolverSettings and ConfigOptions."""
import pytest
from pydantic import ValidationError

from src.strata.utils.config.settings import DEFAULTS_PATH, ConfigOptions, ResolverSettings


def test_settings_defaults():
    """Should use sensible defaults."""
    settings = ResolverSettings(_env_file=None)

    assert settings.config is None
    assert settings.defaults_path == DEFAULTS_PATH == "config/defaults.yaml"
    assert settings.resource_package is None


def test_settings_from_environment(monkeypatch):
    """Should read STRATA_* environment variables."""
    monkeypatch.setenv("STRATA_CONFIG", "/etc/app/prod.yaml")
    monkeypatch.setenv("STRATA_DEFAULTS_PATH", "conf/base.yaml")
    monkeypatch.setenv("STRATA_RESOURCE_PACKAGE", "myapp")

    settings = ResolverSettings(_env_file=None)

    assert settings.config == "/etc/app/prod.yaml"
    assert settings.defaults_path == "conf/base.yaml"
    assert settings.resource_package == "myapp"


def test_settings_blank_config_is_unset(monkeypatch):
    """Should treat a blank STRATA_CONFIG as unset."""
    monkeypatch.setenv("STRATA_CONFIG", "  ")

    assert ResolverSettings(_env_file=None).config is None


def test_settings_rejects_blank_defaults_path():
    """Should reject a blank defaults path."""
    with pytest.raises(ValidationError, match="defaults_path must not be blank"):
        ResolverSettings(_env_file=None, defaults_path="")


def test_config_options():
    """Should default to no explicit path."""
    assert ConfigOptions().config_path is None
    assert ConfigOptions(config_path="/some/path").config_path == "/some/path"
