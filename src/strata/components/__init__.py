"""Host lifecycle components."""

from src.strata.components.config import ConfigComponent, new_config, raw_config  # noqa: F401

__all__ = [
    "ConfigComponent",
    "new_config",
    "raw_config",
]
