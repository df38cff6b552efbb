"""Query parameter stripping.

A query is a list of nodes:

- property key: ``"user/name"``
- parameterized expression: ``("user/name", {"locale": "en"})``
- join: ``{"user/friends": [...subquery...]}``
- union join: ``{"feed/items": {"post": [...], "photo": [...]}}``
- mutation call: ``("fire-missiles!", {"target": "moon"})``

``strip_parameters`` drops every parameter map and keeps everything else,
including order, join keys and mutation names.
"""
from collections.abc import Mapping
from typing import Any, List


def _is_parameterized(node: Any) -> bool:
    return isinstance(node, tuple) and len(node) == 2 and isinstance(node[1], Mapping)


def _strip_subquery(subquery: Any) -> Any:
    if isinstance(subquery, list):
        return strip_parameters(subquery)
    if isinstance(subquery, Mapping):
        # union: one subquery per branch
        return {branch: _strip_subquery(q) for branch, q in subquery.items()}
    # recursion markers and the like
    return subquery


def _strip_node(node: Any) -> Any:
    if _is_parameterized(node):
        return _strip_node(node[0])
    if isinstance(node, Mapping):
        return {key: _strip_subquery(sub) for key, sub in node.items()}
    return node


def strip_parameters(query: List[Any]) -> List[Any]:
    """Remove parameters from every read and mutation in a query.

    Example:
        >>> strip_parameters([("some/key", {"arg": "foo"}), "another/key"])
        ['some/key', 'another/key']
    """
    return [_strip_node(node) for node in query]
