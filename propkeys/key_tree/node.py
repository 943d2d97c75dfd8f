"""Namespace tree nodes built from dotted keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class NamespaceNode:
    """One segment of a dotted key path.

    ``namespace`` is the dotted path from the root to this node and ``name`` its
    last segment; both are empty for the root. ``fields`` holds the leaf names
    attached here and ``children`` the nested groups, both in insertion order.
    """

    namespace: str = ""
    name: str = ""
    fields: list[str] = field(default_factory=list)
    children: list[NamespaceNode] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.namespace == ""

    def full_key(self, field_name: str) -> str:
        """Return the fully qualified key for a field held by this node."""
        if self.is_root:
            return field_name
        return f"{self.namespace}.{field_name}"

    def find_child(self, name: str) -> NamespaceNode | None:
        """Return the child called ``name``, the last one when several match."""
        found = None
        for child in self.children:
            if child.name == name:
                found = child
        return found

    def walk(self) -> Iterator[NamespaceNode]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def iter_keys(self) -> Iterator[str]:
        """Yield every fully qualified key held by this subtree."""
        for node in self.walk():
            for field_name in node.fields:
                yield node.full_key(field_name)
