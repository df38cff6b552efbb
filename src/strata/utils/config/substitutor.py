"""Environment variable substitution in configuration."""
import logging
import os
from typing import Any, Optional

import yaml

from src.strata.exceptions.config import EnvVarSubstitutionError
from src.strata.interfaces import IEnvironmentReader
from src.strata.utils.config.documents import EnvRef, UnhashableSetMemberError, walk
from src.strata.utils.config.yaml_loader import YAMLLoader


logger = logging.getLogger(__name__)


class OsEnvironment:
    """Reads variables from the process environment."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class EnvSubstitutor:
    """Substitutes environment variables for EnvRef markers.

    Supports:
    - Raw substitution: ``!env VAR`` -> the string value of VAR
    - Data substitution: ``!env.yaml VAR`` -> the value of VAR read as YAML
      (``"3000"`` becomes ``3000``; the caller is responsible for values
      whose literal form reads as the intended type)

    An unset variable substitutes as None for both forms.
    SymbolRef markers are left untouched.

    Args:
        environment: Environment reader (default: OsEnvironment)
        yaml_loader: Reader for ``!env.yaml`` values
    """

    def __init__(
        self,
        environment: Optional[IEnvironmentReader] = None,
        yaml_loader: Optional[YAMLLoader] = None,
    ):
        self.environment = environment or OsEnvironment()
        self.yaml_loader = yaml_loader or YAMLLoader()

    def substitute(self, config: Any) -> Any:
        """Recursively substitute environment variables in config.

        Args:
            config: Configuration (dict, list, tuple, set or scalar)

        Returns:
            New config with every EnvRef replaced

        Raises:
            EnvVarSubstitutionError: A value cannot be read as data, or cannot
                be placed in the set it was substituted into
        """
        try:
            return walk(config, self._substitute_leaf)
        except UnhashableSetMemberError as e:
            logger.error(
                "Env var substituted as an unhashable set member",
                extra={"value_type": type(e.value).__name__},
            )
            raise EnvVarSubstitutionError(
                message=f"Environment variable substituted into a set as {type(e.value).__name__}, which is unhashable",
                original_error=e,
            ) from e

    def _substitute_leaf(self, value: Any) -> Any:
        if isinstance(value, EnvRef):
            return self._resolve(value)
        return value  # Strings, numbers, booleans, None, SymbolRef unchanged

    def _resolve(self, ref: EnvRef) -> Any:
        raw = self._get_env_var(ref.name)
        if raw is None or not ref.parse:
            return raw

        try:
            return self.yaml_loader.read_value(raw)
        except yaml.YAMLError as e:
            logger.error(
                f"Env var could not be read as data: {ref.name}",
                extra={"var_name": ref.name, "tag": ref.tag},
            )
            raise EnvVarSubstitutionError(
                message=f"Environment variable '{ref.name}' is not a valid YAML value",
                var_name=ref.name,
                original_error=e,
            ) from e

    def _get_env_var(self, var_name: str) -> Optional[str]:
        """Get environment variable, or None if unset."""
        value = self.environment.get(var_name)
        if value is None:
            logger.warning(
                f"Env var not set, substituting null: {var_name}",
                extra={"var_name": var_name},
            )
            return None

        logger.debug(f"Env var found: {var_name}", extra={"var_name": var_name})
        return value
