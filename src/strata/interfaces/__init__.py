"""Abstract interfaces for the resolution pipeline.

Allows dependency injection for testability and flexibility.
All concrete implementations must honor these contracts.
"""
from abc import abstractmethod
from typing import Any, Dict, Optional, Protocol


# ==================== Source Interfaces ====================

class ISourceLoader(Protocol):
    """Protocol for reading config documents."""

    @abstractmethod
    def load(self, path: str) -> Optional[Dict[str, Any]]:
        """Load and parse the document at path.

        Args:
            path: Absolute filesystem path, or relative resource/filesystem path

        Returns:
            Parsed document, or None if no source exists at path

        Raises:
            MalformedSourceError: Source exists but could not be parsed
        """
        ...


# ==================== Environment Interfaces ====================

class IEnvironmentReader(Protocol):
    """Protocol for read-only process environment access."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value, or None if unset
        """
        ...


# ==================== Module Interfaces ====================

class IModuleLoader(Protocol):
    """Protocol for finding and loading the owner of a symbolic reference.

    Implementations: ImportlibModuleLoader, StaticModuleLoader.
    """

    @abstractmethod
    def lookup(self, module: str) -> Optional[Any]:
        """Return the module namespace if it is already loaded.

        Must not trigger loading.
        """
        ...

    @abstractmethod
    def load(self, module: str) -> Any:
        """Load the module namespace, loading it on demand.

        Repeated calls for the same module must be safe.

        Raises:
            ImportError: Module cannot be loaded
        """
        ...
