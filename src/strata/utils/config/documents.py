"""Document markers and the generic tree walker.

A document is a tree of dicts, lists, tuples, sets and scalars. Two kinds
of scalar markers can appear in it:

- ``EnvRef``: a placeholder for a process environment variable, read either
  as a raw string or parsed as data.
- ``SymbolRef``: a qualified ``module:name`` reference to a runtime value.

Both are produced by the YAML tags ``!env``, ``!env.yaml`` and ``!ref``.
"""
from dataclasses import dataclass
from typing import Any, Callable, Tuple


ENV_TAG = "!env"
ENV_DATA_TAG = "!env.yaml"
REF_TAG = "!ref"

REFERENCE_SEPARATOR = ":"


@dataclass(frozen=True)
class EnvRef:
    """Environment variable placeholder.

    Attributes:
        name: Environment variable name
        parse: Parse the value as YAML data instead of using the raw string
    """

    name: str
    parse: bool = False

    @property
    def tag(self) -> str:
        return ENV_DATA_TAG if self.parse else ENV_TAG


@dataclass(frozen=True)
class SymbolRef:
    """Qualified reference to a runtime value (``package.module:name``)."""

    name: str

    @property
    def is_qualified(self) -> bool:
        module, sep, attr = self.name.partition(REFERENCE_SEPARATOR)
        return bool(sep and module and attr)

    def split(self) -> Tuple[str, str]:
        """Split into (module, attribute path)."""
        module, _, attr = self.name.partition(REFERENCE_SEPARATOR)
        return module, attr


class UnhashableSetMemberError(TypeError):
    """A set member was replaced by a value that cannot live in a set."""

    def __init__(self, value: Any):
        super().__init__(f"unhashable set member: {type(value).__name__}")
        self.value = value


def walk(value: Any, visit: Callable[[Any], Any]) -> Any:
    """Rebuild a document, applying visit to every non-container value.

    Dict values are walked, keys are kept as they are. Lists, tuples, sets
    and frozensets come back as the same kind of container, in the same
    order where order means anything.

    Args:
        value: Document or any part of one
        visit: Function applied to each leaf

    Returns:
        New document; the input is not modified

    Raises:
        UnhashableSetMemberError: A set member walked to an unhashable value
    """
    if isinstance(value, dict):
        return {k: walk(v, visit) for k, v in value.items()}
    elif isinstance(value, list):
        return [walk(item, visit) for item in value]
    elif isinstance(value, tuple):
        return tuple(walk(item, visit) for item in value)
    elif isinstance(value, (set, frozenset)):
        return _rebuild_set(value, visit)
    else:
        return visit(value)


def _rebuild_set(value, visit):
    members = []
    for item in value:
        walked = walk(item, visit)
        try:
            hash(walked)
        except TypeError:
            raise UnhashableSetMemberError(walked) from None
        members.append(walked)
    return frozenset(members) if isinstance(value, frozenset) else set(members)


def find_markers(value: Any, marker_type: type) -> list:
    """Collect every marker of marker_type in a document."""
    found = []

    def _collect(leaf: Any) -> Any:
        if isinstance(leaf, marker_type):
            found.append(leaf)
        return leaf

    walk(value, _collect)
    return found
