"""Source renderers for namespace trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

from propkeys.errors import UnknownLanguageError

from .java import JavaRenderer
from .protocol import Renderer, split_type_name
from .python import PythonRenderer


if TYPE_CHECKING:
    from propkeys.key_tree import NamespaceNode


__all__ = [
    "DEFAULT_LANGUAGE",
    "RENDERERS",
    "JavaRenderer",
    "PythonRenderer",
    "Renderer",
    "get_renderer",
    "render",
    "split_type_name",
]

DEFAULT_LANGUAGE = "python"

RENDERERS: dict[str, type[Renderer]] = {
    JavaRenderer.language: JavaRenderer,
    PythonRenderer.language: PythonRenderer,
}


def get_renderer(language: str = DEFAULT_LANGUAGE) -> Renderer:
    """Return a renderer instance for ``language``."""
    try:
        renderer_cls = RENDERERS[language]
    except KeyError:
        msg = f"unknown target language: {language}"
        raise UnknownLanguageError(msg) from None
    return renderer_cls()


def render(root: NamespaceNode, type_name: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Render ``root`` as source text for ``type_name`` in ``language``."""
    return get_renderer(language).render(root, type_name)
