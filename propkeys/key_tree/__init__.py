"""Namespace tree construction from flat dotted keys."""

from .node import NamespaceNode
from .partition import build_tree, insert_key, resolve_chain, sorted_keys


__all__ = ["NamespaceNode", "build_tree", "insert_key", "resolve_chain", "sorted_keys"]
