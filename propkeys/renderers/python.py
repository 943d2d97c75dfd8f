"""Python source renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING, override

from propkeys.errors import NameCollisionError

from .protocol import ROOT_CONSTANT, Renderer


if TYPE_CHECKING:
    from propkeys.key_tree import NamespaceNode


class PythonRenderer(Renderer):
    """Render a module holding one class with nested classes of ``Final`` strings."""

    language = "python"
    suffix = ".py"
    indent_unit = "    "

    @override
    def check_group(self, node: NamespaceNode) -> None:
        """Refuse fields that a nested class or ``_ROOT`` would shadow.

        A class body keeps only the last binding of a name, so a key such as
        ``a`` next to ``a.b`` would become unreachable.
        """
        taken = {child.name for child in node.children}
        if not node.is_root:
            taken.add(ROOT_CONSTANT)
        for field_name in node.fields:
            if field_name in taken:
                msg = f"key {node.full_key(field_name)!r} collides with a nested group or _ROOT of the same name"
                raise NameCollisionError(msg)

    @override
    def render_module(self, package: str, simple_name: str, body: str) -> str:
        title = f"Configuration keys for package {package}." if package else "Configuration keys."
        if not body.strip():
            body = f"{self.indent_unit}pass\n"
        return (
            f'"""{title}\n'
            "\n"
            "This module is auto-generated from a properties file.\n"
            "Do not version control!\n"
            '"""\n'
            "\n"
            "from typing import Final\n"
            "\n"
            "\n"
            f"class {simple_name}:\n"
            "\n"
            f"{body.rstrip()}\n"
        )

    @override
    def open_group(self, name: str) -> str:
        return f"class {name}:\n\n"

    @override
    def constant(self, name: str, value: str) -> str:
        return f'{name}: Final = "{value}"\n\n'

    @override
    def close_group(self) -> str:
        return ""
