"""Exceptions raised by propkeys."""

from __future__ import annotations


__all__ = [
    "NameCollisionError",
    "PropertiesSyntaxError",
    "PropkeysError",
    "UnknownLanguageError",
    "UsageError",
]


class PropkeysError(Exception):
    """Base class for propkeys errors."""


class UsageError(PropkeysError, ValueError):
    """A required command-line option is missing or malformed."""


class UnknownLanguageError(PropkeysError, ValueError):
    """No renderer is registered for the requested target language."""


class PropertiesSyntaxError(PropkeysError, ValueError):
    """The properties source contains an undecodable escape sequence."""


class NameCollisionError(PropkeysError, ValueError):
    """Two members of one generated group would share a name."""
