"""Config as a managed start/stop resource."""
import logging
from typing import Any, Dict, Optional

from src.strata.utils.config.loader import ConfigLoader
from src.strata.utils.config.settings import ConfigOptions

logger = logging.getLogger(__name__)


class ConfigComponent:
    """Holds the resolved configuration for the lifetime of a host.

    ``start`` resolves the configuration (or adopts an injected value) and
    exposes it as ``value``; ``stop`` releases it. Neither does any I/O
    beyond the resolution itself.

    Args:
        config_path: Explicit environment config path
        loader: ConfigLoader to resolve with (default: ConfigLoader())
        raw_value: Already-resolved configuration; bypasses resolution
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        loader: Optional[ConfigLoader] = None,
        raw_value: Optional[Dict[str, Any]] = None,
    ):
        self.config_path = config_path
        self._loader = loader
        self._raw_value = raw_value
        self.value: Optional[Dict[str, Any]] = None

    @property
    def is_started(self) -> bool:
        return self.value is not None

    def start(self) -> "ConfigComponent":
        """Resolve the configuration. Starting twice is a no-op."""
        if self.is_started:
            logger.debug("Config component already started")
            return self

        if self._raw_value is not None:
            self.value = self._raw_value
            logger.info("Config component started with injected value")
            return self

        loader = self._loader or ConfigLoader()
        self.value = loader.resolve_configuration(ConfigOptions(config_path=self.config_path))
        logger.info(
            "Config component started",
            extra={"config_path": self.config_path, "keys": len(self.value)},
        )
        return self

    def stop(self) -> "ConfigComponent":
        """Release the held configuration."""
        self.value = None
        logger.info("Config component stopped")
        return self

    def __enter__(self) -> "ConfigComponent":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


def new_config(config_path: Optional[str] = None, loader: Optional[ConfigLoader] = None) -> ConfigComponent:
    """Create a component that resolves its configuration on start."""
    return ConfigComponent(config_path=config_path, loader=loader)


def raw_config(value: Dict[str, Any]) -> ConfigComponent:
    """Create a component that exposes value as-is on start."""
    return ConfigComponent(raw_value=value)
