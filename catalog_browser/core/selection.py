"""
Selection resolver: maps an interaction back to the record it landed on.

A click can hit any element inside a rendered unit (cover image, title text),
so resolution walks outward from the hit element and stops at the first node
carrying the correlation attribute. The walk is agnostic of the UI tree:

- ``ancestry`` follows parent pointers of any node type
- ``component_ancestry`` rebuilds the chain from a Dash component tree,
  live ``Component`` objects or their serialized ``{"props": ...}`` form
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional

from .catalog import Catalog, Record
from .display import CORRELATION_ATTR

logger = logging.getLogger(__name__)


def _props(node: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(node, Mapping):
        props = node.get("props")
        return props if isinstance(props, Mapping) else node
    return None


def correlation_key_of(node: Any) -> Optional[str]:
    if node is None:
        return None
    props = _props(node)
    if props is not None:
        value = props.get(CORRELATION_ATTR)
    else:
        value = getattr(node, CORRELATION_ATTR, None)
    return str(value) if value else None


def find_correlation_key(path: Iterable[Any]) -> Optional[str]:
    """Return the key of the nearest node in a leaf-outward ``path`` that carries one."""
    for node in path:
        key = correlation_key_of(node)
        if key is not None:
            return key
    return None


def ancestry(node: Any, parent_of: Callable[[Any], Any]) -> Iterator[Any]:
    while node is not None:
        yield node
        node = parent_of(node)


def _node_id(node: Any) -> Any:
    props = _props(node)
    if props is not None:
        return props.get("id")
    return getattr(node, "id", None)


def _node_children(node: Any) -> List[Any]:
    if isinstance(node, (list, tuple)):
        return list(node)
    props = _props(node)
    if props is not None:
        children = props.get("children")
    else:
        children = getattr(node, "children", None)
    if children is None or isinstance(children, (str, int, float)):
        return []
    if isinstance(children, (list, tuple)):
        return list(children)
    return [children]


def component_ancestry(tree: Any, target_id: Any) -> List[Any]:
    """
    Leaf-outward chain from the component whose id equals ``target_id`` up to
    the root of ``tree``. Empty when the target is not in the tree.
    """
    stack: List[Any] = []

    def visit(node: Any) -> bool:
        stack.append(node)
        if not isinstance(node, (list, tuple)) and _node_id(node) == target_id:
            return True
        for child in _node_children(node):
            if visit(child):
                return True
        stack.pop()
        return False

    if target_id is None or not visit(tree):
        return []
    return [n for n in reversed(stack) if not isinstance(n, (list, tuple))]


def resolve(path: Iterable[Any], catalog: Catalog) -> Optional[Record]:
    """
    Resolve an interaction path to a Record of the universe, or None.

    A miss (no unit in the chain, or a key without a record) is not an error:
    it only means no detail view is shown.
    """
    key = find_correlation_key(path)
    if key is None:
        logger.debug("Interaction did not hit a rendered unit")
        return None

    record = catalog.get(key)
    if record is None:
        logger.warning("Rendered unit has no matching record", extra={"record_id": key})
    return record
