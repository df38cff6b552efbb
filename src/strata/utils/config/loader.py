"""Config loader orchestrator - loads, merges, substitutes and resolves configs."""
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from src.strata.exceptions.config import (
    InvalidConfigPathError,
    MissingConfigError,
    MissingDefaultsError,
)
from src.strata.interfaces import IEnvironmentReader, IModuleLoader, ISourceLoader
from src.strata.utils.config.documents import EnvRef, SymbolRef, find_markers
from src.strata.utils.config.locator import SourceLoader, SourceLocator
from src.strata.utils.config.merger import ConfigMerger
from src.strata.utils.config.settings import ConfigOptions, ResolverSettings
from src.strata.utils.config.substitutor import EnvSubstitutor
from src.strata.utils.config.symbols import SymbolResolver


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Orchestrates config resolution.

    Pipeline:
    1. Load the defaults document (required)
    2. Decide the environment config path (explicit option, then STRATA_CONFIG)
    3. Load the environment config document (required)
    4. Merge defaults <- environment config
    5. Substitute ``!env`` / ``!env.yaml`` markers
    6. Resolve ``!ref`` markers, loading modules on demand
    7. Return the resolved configuration

    Every failure is fatal; no partial configuration is returned.

    Example:
        loader = ConfigLoader()
        config = loader.resolve_configuration(ConfigOptions(config_path="config/prod.yaml"))
    """

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        source_loader: Optional[ISourceLoader] = None,
        environment: Optional[IEnvironmentReader] = None,
        module_loader: Optional[IModuleLoader] = None,
    ):
        """Initialize config loader.

        Args:
            settings: Resolver settings (default: read from STRATA_* env vars)
            source_loader: Document loader (default: SourceLoader over settings.resource_package)
            environment: Environment reader for substitution (default: os.environ)
            module_loader: Loader for symbolic references (default: importlib)
        """
        self.settings = settings or ResolverSettings()
        self.source_loader = source_loader or SourceLoader(
            SourceLocator(resource_package=self.settings.resource_package)
        )
        self.merger = ConfigMerger()
        self.substitutor = EnvSubstitutor(environment=environment)
        self.symbol_resolver = SymbolResolver(module_loader=module_loader)

        logger.debug(
            "ConfigLoader initialized",
            extra={
                "defaults_path": self.settings.defaults_path,
                "resource_package": self.settings.resource_package,
            },
        )

    def get_defaults(self, path: str) -> Dict[str, Any]:
        """Load the defaults document.

        Raises:
            MissingDefaultsError: No defaults source at path
        """
        defaults = self.source_loader.load(path)
        if defaults is None:
            logger.error(f"Defaults config not found: {path}", extra={"path": path})
            raise MissingDefaultsError(path)
        return defaults

    def get_system_prop(self, name: str) -> Optional[str]:
        """Read a process-level property; None when unset."""
        return getattr(self.settings, name, None)

    def open_config_file(self, path: Optional[str]) -> Dict[str, Any]:
        """Load the environment config document at path.

        Raises:
            InvalidConfigPathError: path is None, or relative and not found
            MissingConfigError: path is absolute and not found
        """
        if path is None:
            logger.error("Config path not specified", extra={"path": None})
            raise InvalidConfigPathError(None, reason="no config path given and STRATA_CONFIG is unset")

        config = self.source_loader.load(path)
        if config is not None:
            return config

        logger.error(f"Config file not found: {path}", extra={"path": path})
        if not Path(path).is_absolute():
            raise InvalidConfigPathError(path, reason="not found in resources or on disk")
        raise MissingConfigError(path)

    def get_config(self, path: Optional[str]) -> Dict[str, Any]:
        """Load the environment config, falling back to the STRATA_CONFIG property."""
        return self.open_config_file(path or self.get_system_prop("config"))

    def resolve_configuration(self, options: Optional[ConfigOptions] = None) -> Dict[str, Any]:
        """Resolve the full configuration.

        Args:
            options: Per-call options (explicit config path)

        Returns:
            Merged config with every marker resolved

        Raises:
            MissingDefaultsError, InvalidConfigPathError, MissingConfigError,
            MalformedSourceError, EnvVarSubstitutionError: Source failures
            InvalidReferenceError, ModuleLoadError, UnboundReferenceError:
                Symbolic reference failures
        """
        options = options or ConfigOptions()

        defaults = self.get_defaults(self.settings.defaults_path)
        config = self.get_config(options.config_path)

        merged = self.merger.merge(defaults, config)

        substituted = self.substitutor.substitute(merged)
        logger.debug(
            "Env vars substituted",
            extra={"env_refs": len(find_markers(merged, EnvRef))},
        )

        resolved = self.symbol_resolver.resolve_all(substituted)
        logger.debug(
            "References resolved",
            extra={"symbol_refs": len(find_markers(substituted, SymbolRef))},
        )

        logger.info(
            "Config resolved",
            extra={"config_path": options.config_path, "final_keys": len(resolved)},
        )
        return resolved


def load_config(config_path: Optional[str] = None, **kwargs: Any) -> Dict[str, Any]:
    """Convenience function to resolve config.

    Args:
        config_path: Explicit environment config path
        **kwargs: Passed to ConfigLoader

    Returns:
        Resolved configuration
    """
    loader = ConfigLoader(**kwargs)
    return loader.resolve_configuration(ConfigOptions(config_path=config_path))
