"""Renderer interface for namespace trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar


if TYPE_CHECKING:
    from propkeys.key_tree import NamespaceNode


ROOT_CONSTANT = "_ROOT"


def split_type_name(type_name: str) -> tuple[str, str]:
    """Split a dotted type name into its package and simple name."""
    package, _, simple_name = type_name.rpartition(".")
    return package, simple_name


class Renderer(ABC):
    """Emit a namespace tree as nested constant-group source text.

    Subclasses supply the declaration syntax; the traversal is shared. The root
    node is never wrapped, every other node opens a group holding a ``_ROOT``
    constant, its fields, then its children. Names and values are substituted
    verbatim, without escaping.
    """

    language: ClassVar[str]
    suffix: ClassVar[str]
    indent_unit: ClassVar[str]

    def render(self, root: NamespaceNode, type_name: str) -> str:
        """Render ``root`` as the body of the type ``type_name``."""
        package, simple_name = split_type_name(type_name)
        return self.render_module(package, simple_name, self.render_group(root, 0))

    def render_group(self, node: NamespaceNode, level: int) -> str:
        group_indent = self.indent_unit * level
        member_indent = self.indent_unit * (level + 1)

        self.check_group(node)

        parts: list[str] = []
        if not node.is_root:
            parts.append(group_indent + self.open_group(node.name))
            parts.append(member_indent + self.constant(ROOT_CONSTANT, node.namespace))
        parts.extend(member_indent + self.constant(name, node.full_key(name)) for name in node.fields)
        parts.extend(self.render_group(child, level + 1) for child in node.children)
        if not node.is_root:
            closing = self.close_group()
            if closing:
                parts.append(group_indent + closing)
        return "".join(parts)

    def check_group(self, node: NamespaceNode) -> None:
        """Reject a group the target language cannot declare; accepts all by default."""

    @abstractmethod
    def render_module(self, package: str, simple_name: str, body: str) -> str:
        """Wrap the rendered root body in the outer declaration."""

    @abstractmethod
    def open_group(self, name: str) -> str:
        """Return the line opening a nested group."""

    @abstractmethod
    def constant(self, name: str, value: str) -> str:
        """Return the declaration of one string constant."""

    @abstractmethod
    def close_group(self) -> str:
        """Return the line closing a nested group, or an empty string."""
