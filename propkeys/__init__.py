"""propkeys - nested key constants generated from properties files"""

from ._version import version as __version__
from .config import GeneratorConfig
from .generator import generate, generate_source, load_keys
from .key_tree import NamespaceNode, build_tree
from .renderers import JavaRenderer, PythonRenderer, Renderer, get_renderer, render


__all__ = [
    "GeneratorConfig",
    "JavaRenderer",
    "NamespaceNode",
    "PythonRenderer",
    "Renderer",
    "__version__",
    "build_tree",
    "generate",
    "generate_source",
    "get_renderer",
    "load_keys",
    "render",
]
