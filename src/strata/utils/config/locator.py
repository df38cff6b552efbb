"""Config source locator and loader.

Search order for a path:
1. Absolute path: the filesystem only.
2. Relative path: the resource package first, then the filesystem
   relative to the working directory.
"""
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

from src.strata.exceptions.config import MalformedSourceError
from src.strata.utils.config.yaml_loader import YAMLLoader


logger = logging.getLogger(__name__)

# pathlib.Path or importlib.resources.abc.Traversable
Source = Union[Path, Any]


class SourceLocator:
    """Finds config sources among package resources and on disk.

    Args:
        resource_package: Importable package whose bundled files are searched
            for relative paths (None skips the resource lookup)
        base_dir: Directory relative filesystem paths are resolved against
            (default: current working directory)
    """

    def __init__(
        self,
        resource_package: Optional[str] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self.resource_package = resource_package
        self.base_dir = Path(base_dir) if base_dir is not None else None

        logger.debug(
            "SourceLocator initialized",
            extra={
                "resource_package": resource_package,
                "base_dir": str(self.base_dir) if self.base_dir else None,
            },
        )

    def locate(self, path: str) -> Optional[Source]:
        """Find the source for path.

        Args:
            path: Absolute or relative path

        Returns:
            Readable source, or None if nothing exists at path
        """
        candidate = Path(path)

        if candidate.is_absolute():
            if candidate.is_file():
                return candidate
            logger.debug(f"Config source not on disk: {path}", extra={"path": path})
            return None

        resource = self.locate_resource(path)
        if resource is not None:
            return resource

        fs_path = (self.base_dir or Path.cwd()) / candidate
        if fs_path.is_file():
            logger.debug(f"Found config source on disk: {fs_path}", extra={"path": str(fs_path)})
            return fs_path

        logger.debug(
            f"Config source not found: {path}",
            extra={"path": path, "resource_package": self.resource_package},
        )
        return None

    def locate_resource(self, path: str) -> Optional[Source]:
        """Find path among the resource package's bundled files."""
        if not self.resource_package:
            return None

        try:
            resource = resources.files(self.resource_package).joinpath(path)
        except ModuleNotFoundError:
            logger.warning(
                f"Resource package not importable: {self.resource_package}",
                extra={"resource_package": self.resource_package},
            )
            return None

        if resource.is_file():
            logger.debug(
                f"Found config source in resources: {path}",
                extra={"path": path, "resource_package": self.resource_package},
            )
            return resource
        return None


class SourceLoader:
    """Loads config documents, returning None for missing sources.

    Example:
        loader = SourceLoader(resource_package="myapp")
        defaults = loader.load("config/defaults.yaml")
    """

    def __init__(
        self,
        locator: Optional[SourceLocator] = None,
        yaml_loader: Optional[YAMLLoader] = None,
    ):
        self.locator = locator or SourceLocator()
        self.yaml_loader = yaml_loader or YAMLLoader()

    def load(self, path: str) -> Optional[Dict[str, Any]]:
        """Load and parse the document at path.

        Args:
            path: Absolute or relative path

        Returns:
            Parsed document, or None if no source exists

        Raises:
            MalformedSourceError: Source exists but cannot be read or parsed
        """
        source = self.locator.locate(path)
        if source is None:
            return None

        try:
            with source.open("r", encoding="utf-8") as f:
                data = self.yaml_loader.parse(f, source=path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                f"Failed to read config file {path}: {e}",
                extra={"path": path, "error": str(e)},
            )
            raise MalformedSourceError(
                message=f"Failed to read config file {path}",
                config_file=path,
                original_error=e,
            ) from e

        logger.info(
            f"Config source loaded: {path}",
            extra={"path": path, "keys": list(data.keys())},
        )
        return data
