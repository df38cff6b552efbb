"""Configuration resolution utilities."""

from src.strata.utils.config.documents import EnvRef, SymbolRef, walk  # noqa: F401
from src.strata.utils.config.yaml_loader import ConfigYAMLLoader, YAMLLoader  # noqa: F401
from src.strata.utils.config.locator import SourceLocator, SourceLoader  # noqa: F401
from src.strata.utils.config.substitutor import EnvSubstitutor, OsEnvironment  # noqa: F401
from src.strata.utils.config.merger import ConfigMerger, deep_merge  # noqa: F401
from src.strata.utils.config.symbols import (  # noqa: F401
    ImportlibModuleLoader,
    StaticModuleLoader,
    SymbolResolver,
)
from src.strata.utils.config.settings import ConfigOptions, ResolverSettings  # noqa: F401
from src.strata.utils.config.loader import ConfigLoader, load_config  # noqa: F401

__all__ = [
    # Document markers
    "EnvRef",
    "SymbolRef",
    "walk",
    # YAML parsing
    "ConfigYAMLLoader",
    "YAMLLoader",
    # Source loading
    "SourceLocator",
    "SourceLoader",
    # Environment variable substitution
    "EnvSubstitutor",
    "OsEnvironment",
    # Config merging
    "ConfigMerger",
    "deep_merge",
    # Symbolic references
    "ImportlibModuleLoader",
    "StaticModuleLoader",
    "SymbolResolver",
    # Orchestration
    "ConfigOptions",
    "ResolverSettings",
    "ConfigLoader",
    "load_config",
]
