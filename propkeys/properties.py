"""Reader for Java-style ``.properties`` files.

Only enough of the format is handled to recover the key set faithfully:
comment lines, backslash line continuation, ``=``/``:``/whitespace
separators and backslash escapes including ``\\uXXXX``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from propkeys.errors import PropertiesSyntaxError


if TYPE_CHECKING:
    from collections.abc import Iterator


__all__ = ["DEFAULT_ENCODING", "load_properties", "parse_properties", "unescape"]

DEFAULT_ENCODING = "iso-8859-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _trailing_backslashes(text: str, end: int) -> int:
    count = 0
    while end - count > 0 and text[end - count - 1] == "\\":
        count += 1
    return count


def _logical_lines(text: str) -> Iterator[str]:
    """Join continued lines and drop blanks and comments."""
    pending = ""
    continuing = False
    for natural in _LINE_BREAK.split(text):
        line = natural.lstrip(_WHITESPACE)
        if not continuing and (not line or line[0] in _COMMENT_MARKERS):
            continue
        if _trailing_backslashes(line, len(line)) % 2:
            pending += line[:-1]
            continuing = True
            continue
        yield pending + line
        pending = ""
        continuing = False
    if continuing and pending:
        yield pending


def _rstrip_unescaped(raw: str) -> str:
    end = len(raw)
    while end > 0 and raw[end - 1] in _WHITESPACE and not _trailing_backslashes(raw, end - 1) % 2:
        end -= 1
    return raw[:end]


def _split_entry(line: str) -> tuple[str, str]:
    escaped = False
    for index, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS:
            return line[:index], line[index + 1 :].lstrip(_WHITESPACE)
        elif char in _WHITESPACE:
            rest = line[index:].lstrip(_WHITESPACE)
            if rest and rest[0] in _SEPARATORS:
                rest = rest[1:].lstrip(_WHITESPACE)
            return line[:index], rest
    return line, ""


def unescape(raw: str) -> str:
    """Decode backslash escapes in a raw key or value."""
    chars: list[str] = []
    index = 0
    length = len(raw)
    while index < length:
        char = raw[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= length:
            break
        char = raw[index]
        index += 1
        if char == "u":
            digits = raw[index : index + 4]
            if len(digits) < 4 or not set(digits) <= _HEX_DIGITS:
                msg = f"malformed \\uxxxx encoding: \\u{digits}"
                raise PropertiesSyntaxError(msg)
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(char, char))
    return "".join(chars)


def parse_properties(text: str, into: dict[str, str] | None = None) -> dict[str, str]:
    """Parse properties text into a key/value dict; later keys win.

    Entries are stored in ``into`` (a new dict by default) as they are read, so
    a caller passing its own dict keeps the entries that precede a malformed
    line when PropertiesSyntaxError is raised.
    """
    entries = {} if into is None else into
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        entries[unescape(raw_key)] = unescape(_rstrip_unescaped(raw_value))
    return entries


def load_properties(
    path: str | Path, encoding: str = DEFAULT_ENCODING, into: dict[str, str] | None = None
) -> dict[str, str]:
    """Read and parse the properties file at ``path``."""
    with Path(path).open(encoding=encoding, newline="") as handle:
        return parse_properties(handle.read(), into=into)
