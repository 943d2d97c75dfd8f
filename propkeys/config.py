"""Run configuration for a key generation pass."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from propkeys.errors import UsageError
from propkeys.properties import DEFAULT_ENCODING
from propkeys.renderers import DEFAULT_LANGUAGE


if TYPE_CHECKING:
    from argparse import Namespace


__all__ = ["REQUIRED_OPTIONS", "GeneratorConfig"]

# (attribute, message) in the order missing options are reported.
REQUIRED_OPTIONS = (
    ("tmp", "Please specify a temporary directory!"),
    ("classname", "Please specify an output classname!"),
    ("properties", "Please specify an input properties file!"),
    ("out", "Please specify an output zip file!"),
)


@dataclass(frozen=True)
class GeneratorConfig:
    """Inputs and outputs of one generation run."""

    archive_path: Path
    properties_path: Path
    type_name: str
    tmp_dir: Path
    language: str = DEFAULT_LANGUAGE
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_namespace(cls, args: Namespace) -> GeneratorConfig:
        """Build a config from parsed CLI arguments, raising UsageError on gaps."""
        for attribute, msg in REQUIRED_OPTIONS:
            if not getattr(args, attribute, None):
                raise UsageError(msg)
        if any(not segment for segment in args.classname.split(".")):
            msg = f"Invalid classname {args.classname!r}: empty name segment!"
            raise UsageError(msg)
        encoding = getattr(args, "encoding", None) or DEFAULT_ENCODING
        try:
            _ = codecs.lookup(encoding)
        except LookupError:
            msg = f"Unknown properties encoding {encoding!r}!"
            raise UsageError(msg) from None
        return cls(
            archive_path=Path(args.out),
            properties_path=Path(args.properties),
            type_name=args.classname,
            tmp_dir=Path(args.tmp),
            language=getattr(args, "language", None) or DEFAULT_LANGUAGE,
            encoding=encoding,
        )
