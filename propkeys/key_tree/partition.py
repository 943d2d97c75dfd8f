"""Partition sorted dotted keys into a namespace tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .node import NamespaceNode


if TYPE_CHECKING:
    from collections.abc import Iterable


def _split_segments(prefix: str) -> list[str]:
    # An empty prefix is one empty segment; trailing empty segments are dropped.
    if not prefix:
        return [""]
    segments = prefix.split(".")
    while segments and not segments[-1]:
        _ = segments.pop()
    return segments


def resolve_chain(start: NamespaceNode, prefix: str) -> NamespaceNode:
    """Return the node for ``prefix`` below ``start``, creating missing nodes.

    Children are matched by a linear search over ``children``; when more than
    one child carries the same name the last match is descended into.
    """
    node = start
    segments = _split_segments(prefix)
    for index, segment in enumerate(segments):
        child = node.find_child(segment)
        if child is None:
            child = NamespaceNode(namespace=".".join(segments[: index + 1]), name=segment)
            node.children.append(child)
        node = child
    return node


def insert_key(root: NamespaceNode, key: str) -> NamespaceNode:
    """Attach ``key`` to the tree and return the node now holding its field."""
    if "." not in key:
        root.fields.append(key)
        return root

    prefix, _, field_name = key.rpartition(".")
    group = resolve_chain(root, prefix)
    group.fields.append(field_name)
    return group


def _utf16_units(key: str) -> bytes:
    return key.encode("utf-16-be", "surrogatepass")


def sorted_keys(keys: Iterable[str]) -> list[str]:
    """Return ``keys`` in ascending UTF-16 code unit order.

    Characters above U+FFFF sort as their surrogate pairs, ahead of U+E000..U+FFFF.
    """
    return sorted(keys, key=_utf16_units)


def build_tree(keys: Iterable[str]) -> NamespaceNode:
    """Build a namespace tree from keys that are already sorted.

    Root children come out in the order their first segment is seen, which is
    alphabetical for a sorted input. Deeper siblings keep first-seen order.
    """
    root = NamespaceNode()
    for key in keys:
        if key is None:
            msg = "keys must not be None"
            raise ValueError(msg)
        _ = insert_key(root, key)
    return root
