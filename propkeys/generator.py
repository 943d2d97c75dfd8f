"""Properties file to archived key-constant source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from propkeys.errors import PropertiesSyntaxError
from propkeys.key_tree import build_tree, sorted_keys
from propkeys.packager import package
from propkeys.properties import DEFAULT_ENCODING, load_properties
from propkeys.renderers import get_renderer


if TYPE_CHECKING:
    from pathlib import Path

    from propkeys.config import GeneratorConfig


__all__ = ["generate", "generate_source", "load_keys"]

log = logging.getLogger(__name__)


def load_keys(path: str | Path, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Return the sorted keys of a properties file.

    A file that cannot be read or decoded is logged and yields the keys loaded
    before the failure, possibly none, so generation still goes ahead.
    """
    properties: dict[str, str] = {}
    try:
        _ = load_properties(path, encoding=encoding, into=properties)
    except (OSError, UnicodeDecodeError, PropertiesSyntaxError):
        log.exception("failed to load properties from %s, continuing with %d keys", path, len(properties))
    keys = sorted_keys(properties)
    log.info("loaded %d keys from %s", len(keys), path)
    return keys


def generate_source(keys: list[str], type_name: str, language: str) -> str:
    """Render sorted ``keys`` as source text for ``type_name``."""
    return get_renderer(language).render(build_tree(keys), type_name)


def generate(config: GeneratorConfig) -> str:
    """Run the full pipeline for ``config`` and return the archive entry name.

    Output I/O errors and name collisions in the rendered tree propagate to
    the caller.
    """
    renderer = get_renderer(config.language)
    keys = load_keys(config.properties_path, encoding=config.encoding)
    contents = renderer.render(build_tree(keys), config.type_name)
    return package(config.tmp_dir, config.archive_path, config.type_name, contents, renderer.suffix)
