"""Root pytest configuration."""
from pathlib import Path

import pytest

from src.strata.testing import DictEnvironment, MockSourceLoader, StaticModuleLoader
from src.strata.utils.config import ConfigLoader, ResolverSettings


DEFAULTS_PATH = "config/defaults.yaml"


@pytest.fixture(autouse=True)
def clean_strata_env(monkeypatch):
    """Keep STRATA_* variables from the outer shell out of every test."""
    for name in ("STRATA_CONFIG", "STRATA_DEFAULTS_PATH", "STRATA_RESOURCE_PACKAGE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a temp file and return its absolute path."""
    def _write(contents: str, name: str = "config.yaml") -> str:
        path = tmp_path / name
        path.write_text(contents, encoding="utf-8")
        return str(path.resolve())

    return _write


@pytest.fixture
def make_loader():
    """Build a ConfigLoader wired to in-memory doubles.

    Args (of the returned factory):
        documents: path -> document for MockSourceLoader
        env: variables for DictEnvironment
        modules: registry for StaticModuleLoader (None uses importlib)
        config: STRATA_CONFIG equivalent
    """
    def _make(documents=None, env=None, modules=None, config=None):
        settings = ResolverSettings(_env_file=None, config=config)
        return ConfigLoader(
            settings=settings,
            source_loader=MockSourceLoader(documents),
            environment=DictEnvironment(env),
            module_loader=StaticModuleLoader(modules) if modules is not None else None,
        )

    return _make


@pytest.fixture
def resources_dir() -> Path:
    return Path(__file__).parent / "fixtures" / "resources"
