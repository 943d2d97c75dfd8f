"""Interface for ``python -m propkeys``."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING, NoReturn, override

from ._version import version
from .config import GeneratorConfig
from .errors import PropkeysError, UsageError
from .generator import generate
from .properties import DEFAULT_ENCODING
from .renderers import DEFAULT_LANGUAGE, RENDERERS


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["build_parser", "main"]

log = logging.getLogger("propkeys")


class _ArgumentParser(ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    @override
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = _ArgumentParser(
        prog="propkeys",
        description="Generate nested key constants from a properties file and zip the source.",
        allow_abbrev=False,
    )
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("-out", metavar="PATH", help="output zip file")
    _ = parser.add_argument("-properties", metavar="PATH", help="properties input path")
    _ = parser.add_argument("-classname", metavar="FQCN", help="destination class name, e.g. com.acme.Keys")
    _ = parser.add_argument("-tmp", metavar="DIR", help="temp output path")
    _ = parser.add_argument(
        "-language",
        choices=sorted(RENDERERS),
        default=DEFAULT_LANGUAGE,
        help=f"generated source language (default: {DEFAULT_LANGUAGE})",
    )
    _ = parser.add_argument(
        "-encoding",
        default=DEFAULT_ENCODING,
        metavar="CODEC",
        help=f"properties file encoding (default: {DEFAULT_ENCODING})",
    )
    _ = parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="logging level (default: INFO)",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(args: Sequence[str] | None = None) -> int:
    """Run the generator; return the process exit status."""
    parser = build_parser()
    namespace = parser.parse_args(args)
    try:
        config = GeneratorConfig.from_namespace(namespace)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    _configure_logging(namespace.log_level)
    try:
        _ = generate(config)
    except (OSError, PropkeysError) as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
