"""Configuration source exceptions."""
from typing import Optional

from src.strata.exceptions.base import StrataError


class ConfigError(StrataError):
    """Base exception for configuration source errors.

    Args:
        message: Human-readable error message
        config_file: Path of the offending config source
        details: Additional error context
        original: Underlying exception, if any
    """

    error_code = "CONFIG_ERROR"

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        details: Optional[dict] = None,
        original: Optional[Exception] = None,
    ):
        details = dict(details or {})
        if config_file is not None:
            details["config_file"] = config_file
        super().__init__(message, details=details, original=original)
        self.config_file = config_file


class MissingDefaultsError(ConfigError):
    """Defaults source not found; there is no baseline to resolve against."""

    error_code = "MISSING_DEFAULTS"

    def __init__(self, path: str):
        super().__init__(f"Defaults config not found: {path}", config_file=path)


class InvalidConfigPathError(ConfigError):
    """Environment config path is unspecified or cannot be opened.

    The literal path is always part of the message so operators can
    see what was asked for.
    """

    error_code = "INVALID_CONFIG_PATH"

    def __init__(self, path: Optional[str], reason: Optional[str] = None):
        message = f"Invalid config file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, config_file=path)


class MissingConfigError(ConfigError):
    """Environment config path resolved but the source does not exist."""

    error_code = "MISSING_CONFIG"

    def __init__(self, path: str):
        super().__init__(f"Invalid config file: {path} (file not found)", config_file=path)


class MalformedSourceError(ConfigError):
    """Config source exists but could not be read or parsed."""

    error_code = "MALFORMED_SOURCE"

    def __init__(
        self,
        message: str = "Failed to parse config file",
        config_file: Optional[str] = None,
        line_number: Optional[int] = None,
        column_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if line_number is not None:
            details["line"] = line_number
        if column_number is not None:
            details["column"] = column_number
        super().__init__(message, config_file=config_file, details=details, original=original_error)
        self.original_error = original_error


class EnvVarSubstitutionError(ConfigError):
    """Environment variable value could not be substituted."""

    error_code = "ENV_SUBSTITUTION_FAILED"

    def __init__(
        self,
        message: str = "Environment variable substitution failed",
        var_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if var_name is not None:
            details["var_name"] = var_name
        super().__init__(message, details=details, original=original_error)
        self.var_name = var_name
        self.original_error = original_error
