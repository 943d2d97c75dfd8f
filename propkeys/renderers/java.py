"""Java source renderer."""

from __future__ import annotations

from typing import override

from .protocol import Renderer


_BANNER = "/*\n * This class is auto-generated from a properties file.\n * Do not version control!\n */\n"


class JavaRenderer(Renderer):
    """Render a final class with nested ``public static final`` classes."""

    language = "java"
    suffix = ".java"
    indent_unit = "\t"

    @override
    def render_module(self, package: str, simple_name: str, body: str) -> str:
        header = f"package {package};\n\n" if package else ""
        return f"{header}{_BANNER}public final class {simple_name} {{\n\n{body}}}\n"

    @override
    def open_group(self, name: str) -> str:
        return f"public static final class {name} {{\n\n"

    @override
    def constant(self, name: str, value: str) -> str:
        return f'public static final String {name} = "{value}";\n\n'

    @override
    def close_group(self) -> str:
        return "}\n\n"
