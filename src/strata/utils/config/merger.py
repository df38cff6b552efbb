"""Config merger for combining config documents."""
import logging
from typing import Any, Dict


logger = logging.getLogger(__name__)


class ConfigMerger:
    """Deep merges configuration dictionaries.

    Merge rules:
    - Dicts on both sides: merged recursively
    - Anything else (lists, sets, scalars, markers): override value wins

    Example:
        base = {"db": {"host": "localhost", "port": 5432}, "tags": ["a", "b"]}
        override = {"db": {"host": "db.internal"}, "tags": ["c"]}

        result = {"db": {"host": "db.internal", "port": 5432}, "tags": ["c"]}
    """

    def merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge override into base config.

        Args:
            base: Base configuration (lower priority)
            override: Override configuration (higher priority)

        Returns:
            Merged configuration (new dict, inputs not modified)
        """
        if not base:
            return dict(override) if override else {}

        if not override:
            return dict(base)

        result = dict(base)

        for key, override_value in override.items():
            base_value = result.get(key)
            if isinstance(base_value, dict) and isinstance(override_value, dict):
                result[key] = self.merge(base_value, override_value)
            else:
                result[key] = override_value

        return result

    def merge_multiple(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configs in order (left to right, right wins).

        Args:
            *configs: Configs to merge

        Returns:
            Final merged config
        """
        result: Dict[str, Any] = {}

        for config in configs:
            result = self.merge(result, config)

        logger.debug(
            "Configs merged",
            extra={"sources": len(configs), "result_keys": len(result)},
        )
        return result


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Convenience function for deep merging configs."""
    return ConfigMerger().merge(base, override)
