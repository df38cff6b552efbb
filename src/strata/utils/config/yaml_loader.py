"""YAML document parser with environment and reference tags."""
import logging
from typing import Any, Dict, IO, Union

import yaml

from src.strata.exceptions.config import MalformedSourceError
from src.strata.utils.config.documents import (
    ENV_DATA_TAG,
    ENV_TAG,
    REF_TAG,
    EnvRef,
    SymbolRef,
)


logger = logging.getLogger(__name__)


class ConfigYAMLLoader(yaml.SafeLoader):
    """Safe YAML loader that understands ``!env``, ``!env.yaml`` and ``!ref``."""


def _construct_env(loader: yaml.SafeLoader, node: yaml.Node) -> EnvRef:
    return EnvRef(name=loader.construct_scalar(node).strip())


def _construct_env_data(loader: yaml.SafeLoader, node: yaml.Node) -> EnvRef:
    return EnvRef(name=loader.construct_scalar(node).strip(), parse=True)


def _construct_ref(loader: yaml.SafeLoader, node: yaml.Node) -> SymbolRef:
    return SymbolRef(name=loader.construct_scalar(node).strip())


ConfigYAMLLoader.add_constructor(ENV_TAG, _construct_env)
ConfigYAMLLoader.add_constructor(ENV_DATA_TAG, _construct_env_data)
ConfigYAMLLoader.add_constructor(REF_TAG, _construct_ref)


class EnvValueYAMLLoader(yaml.SafeLoader):
    """Loader for environment variable values: only ``!ref`` is allowed.

    An ``!env`` or ``!env.yaml`` tag inside a value has no constructor here,
    so it fails to load instead of leaving a marker behind.
    """


EnvValueYAMLLoader.add_constructor(REF_TAG, _construct_ref)


def _problem_position(error: yaml.YAMLError):
    mark = getattr(error, "problem_mark", None)
    if mark is None:
        return None, None
    # PyYAML marks are 0-based
    return mark.line + 1, mark.column + 1


class YAMLLoader:
    """Parses YAML config documents into Python dictionaries."""

    def parse(self, stream: Union[str, IO[str]], source: str = "<string>") -> Dict[str, Any]:
        """Parse a YAML document.

        Args:
            stream: YAML text or an open text stream
            source: Where the text came from, for error messages

        Returns:
            Parsed document ({} for an empty document)

        Raises:
            MalformedSourceError: If YAML syntax is invalid or the top level is not a mapping
        """
        try:
            data = yaml.load(stream, Loader=ConfigYAMLLoader)
        except yaml.YAMLError as e:
            line_number, column_number = _problem_position(e)
            logger.error(
                f"YAML parse error in {source}: {e}",
                extra={"path": source, "line": line_number, "column": column_number},
            )
            raise MalformedSourceError(
                message=f"Failed to parse config file {source}",
                config_file=source,
                line_number=line_number,
                column_number=column_number,
                original_error=e,
            ) from e

        if data is None:
            logger.debug(f"YAML document is empty: {source}", extra={"path": source})
            return {}

        if not isinstance(data, dict):
            logger.error(
                f"YAML document must contain a mapping: {source}",
                extra={"path": source, "type": type(data).__name__},
            )
            raise MalformedSourceError(
                message=f"Config file {source} must contain a mapping, got {type(data).__name__}",
                config_file=source,
            )

        return data

    def read_value(self, text: str) -> Any:
        """Read a single YAML value (not a document).

        Used for ``!env.yaml`` markers: ``"3000"`` reads as ``3000``,
        ``"yes"`` as ``True``, ``"[1, 2]"`` as a list, and a bare word
        stays a string. An empty string reads as None.

        ``!ref`` tags are read as references; ``!env`` tags are rejected.

        Raises:
            yaml.YAMLError: If text is not a single valid YAML value
        """
        return yaml.load(text, Loader=EnvValueYAMLLoader)
