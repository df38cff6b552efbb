"""Symbolic reference resolution with on-demand module loading."""
import importlib
import logging
import sys
from collections.abc import Mapping
from typing import Any, Dict, Optional

from src.strata.exceptions.references import (
    InvalidReferenceError,
    ModuleLoadError,
    ReferenceResolutionError,
    UnboundReferenceError,
)
from src.strata.interfaces import IModuleLoader
from src.strata.utils.config.documents import SymbolRef, UnhashableSetMemberError, walk


logger = logging.getLogger(__name__)

_UNBOUND = object()


class ImportlibModuleLoader:
    """Loads Python modules through the import system.

    ``importlib.import_module`` holds the per-module import lock, so
    concurrent loads of the same module are de-duplicated.
    """

    def lookup(self, module: str) -> Optional[Any]:
        return sys.modules.get(module)

    def load(self, module: str) -> Any:
        try:
            return importlib.import_module(module)
        except ImportError:
            raise
        except Exception as e:
            # Errors raised while executing the module body count as load failures
            raise ImportError(f"Error while importing {module!r}: {e}", name=module) from e


class StaticModuleLoader:
    """Module loader backed by a fixed registry.

    For hosts that cannot (or should not) import code on demand. Namespaces
    may be mappings or plain objects.

    Example:
        loader = StaticModuleLoader({"handlers": {"default": default_handler}})
    """

    def __init__(self, registry: Optional[Dict[str, Any]] = None):
        self.registry = dict(registry or {})
        self.load_calls = []

    def register(self, module: str, namespace: Any) -> None:
        self.registry[module] = namespace

    def lookup(self, module: str) -> Optional[Any]:
        return self.registry.get(module)

    def load(self, module: str) -> Any:
        self.load_calls.append(module)
        try:
            return self.registry[module]
        except KeyError:
            raise ImportError(f"No module named {module!r} in registry", name=module) from None


def _get_bound(namespace: Any, attr_path: str) -> Any:
    """Read a dotted attribute path from a module, object or mapping."""
    value = namespace
    for part in attr_path.split("."):
        if isinstance(value, Mapping):
            value = value.get(part, _UNBOUND)
        else:
            value = getattr(value, part, _UNBOUND)
        if value is _UNBOUND:
            return _UNBOUND
    return value


class SymbolResolver:
    """Resolves ``module:name`` references to bound values.

    Lookup is two-phase: the already-loaded namespace is tried first, and
    only when the name is not found there is the module loaded and the
    lookup retried.

    Args:
        module_loader: Loader used for lookups and on-demand loads
            (default: ImportlibModuleLoader)
    """

    def __init__(self, module_loader: Optional[IModuleLoader] = None):
        self.module_loader = module_loader or ImportlibModuleLoader()

    def resolve(self, reference: Any) -> Any:
        """Resolve one qualified reference.

        Args:
            reference: SymbolRef or its string form ("package.module:name")

        Returns:
            The bound value

        Raises:
            InvalidReferenceError: Reference has no owning module
            ModuleLoadError: Owning module failed to load
            UnboundReferenceError: Name not bound after loading
        """
        ref = reference if isinstance(reference, SymbolRef) else SymbolRef(str(reference))
        if not ref.is_qualified:
            logger.error(f"Unqualified reference: {ref.name}", extra={"reference": ref.name})
            raise InvalidReferenceError(ref.name)

        module, attr = ref.split()

        namespace = self.module_loader.lookup(module)
        if namespace is not None:
            value = _get_bound(namespace, attr)
            if value is not _UNBOUND:
                return value

        logger.debug(f"Loading module for reference {ref.name}", extra={"module_name": module})
        try:
            namespace = self.module_loader.load(module)
        except ImportError as e:
            logger.error(
                f"Failed to load module {module}: {e}",
                extra={"module_name": module, "reference": ref.name},
            )
            raise ModuleLoadError(module, reference=ref.name, original=e) from e

        value = _get_bound(namespace, attr)
        if value is _UNBOUND:
            logger.error(f"Reference not bound: {ref.name}", extra={"reference": ref.name})
            raise UnboundReferenceError(ref.name)
        return value

    def resolve_all(self, document: Any) -> Any:
        """Replace every SymbolRef in a document with its bound value."""
        def _resolve_leaf(value: Any) -> Any:
            if isinstance(value, SymbolRef):
                return self.resolve(value)
            return value

        try:
            return walk(document, _resolve_leaf)
        except UnhashableSetMemberError as e:
            logger.error(
                "Reference resolved to an unhashable set member",
                extra={"value_type": type(e.value).__name__},
            )
            raise ReferenceResolutionError(
                f"Reference inside a set resolved to {type(e.value).__name__}, which is unhashable",
                original=e,
            ) from e
