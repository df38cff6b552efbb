"""Custom exceptions for the resolver."""

from src.strata.exceptions.base import StrataError

from src.strata.exceptions.config import (
    ConfigError,
    MissingDefaultsError,
    InvalidConfigPathError,
    MissingConfigError,
    MalformedSourceError,
    EnvVarSubstitutionError,
)

from src.strata.exceptions.references import (
    ReferenceResolutionError,
    InvalidReferenceError,
    ModuleLoadError,
    UnboundReferenceError,
)

__all__ = [
    # Base exceptions
    "StrataError",
    # Configuration source exceptions
    "ConfigError",
    "MissingDefaultsError",
    "InvalidConfigPathError",
    "MissingConfigError",
    "MalformedSourceError",
    "EnvVarSubstitutionError",
    # Reference exceptions
    "ReferenceResolutionError",
    "InvalidReferenceError",
    "ModuleLoadError",
    "UnboundReferenceError",
]
