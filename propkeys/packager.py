"""Stage generated source on disk and archive it as a single-entry zip."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import BinaryIO


__all__ = ["BUFFER_SIZE", "copy_stream", "entry_name", "package", "stage_source", "write_archive"]

log = logging.getLogger(__name__)

BUFFER_SIZE = 8192


def copy_stream(source: BinaryIO, target: BinaryIO, buffer_size: int = BUFFER_SIZE) -> int:
    """Copy every byte from ``source`` to ``target`` and return the count.

    Neither stream is flushed or closed.
    """
    if buffer_size <= 0:
        msg = "buffer_size must be positive"
        raise ValueError(msg)
    total = 0
    while True:
        chunk = source.read(buffer_size)
        if not chunk:
            break
        _ = target.write(chunk)
        total += len(chunk)
    return total


def entry_name(type_name: str, suffix: str) -> str:
    """Return the archive entry for ``type_name``, e.g. ``com/acme/Keys.py``."""
    if not type_name:
        msg = "type_name must not be empty"
        raise ValueError(msg)
    segments = type_name.split(".")
    if any(not segment for segment in segments):
        msg = f"type_name must not contain empty segments: {type_name}"
        raise ValueError(msg)
    return str(PurePosixPath(*segments)) + suffix


def stage_source(tmp_dir: str | Path, entry: str, contents: str) -> Path:
    """Write ``contents`` under ``tmp_dir`` at ``entry`` and return the file path.

    Characters UTF-8 cannot encode, such as lone surrogates, are written as ``?``.
    """
    staged = Path(tmp_dir).joinpath(*PurePosixPath(entry).parts)
    staged.parent.mkdir(parents=True, exist_ok=True)
    with staged.open("w", encoding="utf-8", errors="replace", newline="") as handle:
        _ = handle.write(contents)
    log.debug("staged %s", staged)
    return staged


def write_archive(archive_path: str | Path, staged: Path, entry: str) -> int:
    """Create ``archive_path`` holding ``staged`` as its only entry ``entry``."""
    with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        with staged.open("rb") as source, archive.open(entry, "w") as target:
            copied = copy_stream(source, target)
    log.debug("archived %d bytes as %s", copied, entry)
    return copied


def package(tmp_dir: str | Path, archive_path: str | Path, type_name: str, contents: str, suffix: str) -> str:
    """Stage ``contents`` for ``type_name`` and archive it; return the entry name."""
    entry = entry_name(type_name, suffix)
    staged = stage_source(tmp_dir, entry, contents)
    _ = write_archive(archive_path, staged, entry)
    log.info("wrote %s to %s", entry, archive_path)
    return entry
