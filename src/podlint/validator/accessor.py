"""
Field access over mapping nodes.

The only module that knows mappings are stored as alternating key/value
children. Every validator goes through `field` and `pairs`.
"""

from typing import Iterator, Optional, Tuple

from podlint.core.models import Node


def pairs(node: Optional[Node]) -> Iterator[Tuple[Node, Node]]:
    """Yields the (key, value) entries of a mapping in source order."""
    if node is None or not node.is_mapping:
        return
    children = node.children
    for i in range(0, len(children) - 1, 2):
        yield children[i], children[i + 1]


def field(node: Optional[Node], key: str) -> Optional[Node]:
    """
    Returns the value of `key` in a mapping node, or None when absent.

    Non-mapping input is never an error here; callers decide whether
    absence matters. On duplicate keys the first occurrence wins.
    """
    for k, v in pairs(node):
        if k.is_scalar and k.value == key:
            return v
    return None
