"""CLI entrypoint speaking the mdbook preprocessor protocol."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import IO, Any, Tuple

from .config import ConfigError
from .context import PreprocessorContext
from .git.repository import RepositoryNotFoundError
from .logging import configure_logging, get_logger
from .models import Book
from .postproc.footer import PathOutsideRepositoryError
from .preprocessor import OpenOnPreprocessor


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-open-on-gh",
        description=(
            "mdbook preprocessor that appends an 'edit on GitHub' footer to every chapter. "
            "Without a sub-command it reads [context, book] JSON from stdin and writes "
            "the processed book to stdout."
        ),
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    supports_parser = subparsers.add_parser(
        "supports",
        help="Report whether a renderer is supported (exit status 0 when it is).",
    )
    _add_verbose_option(supports_parser, suppress_default=True)
    supports_parser.add_argument("renderer", help="Renderer name passed by mdbook.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdbook-open-on-gh."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    preprocessor = OpenOnPreprocessor()

    if args.command == "supports":
        supported = preprocessor.supports_renderer(args.renderer)
        logger.debug("Renderer %s supported: %s", args.renderer, supported)
        sys.exit(0 if supported else 1)

    try:
        context, book = _read_input(sys.stdin)
    except ValueError as exc:
        parser.exit(1, f"mdbook-open-on-gh: invalid input from mdbook: {exc}\n")

    if context.mdbook_version:
        logger.debug("Invoked by mdbook %s for renderer %s", context.mdbook_version, context.renderer)

    try:
        book = preprocessor.run(context, book)
    except (ConfigError, RepositoryNotFoundError, PathOutsideRepositoryError) as exc:
        parser.exit(1, f"mdbook-open-on-gh failed: {exc}\n")

    json.dump(book.to_json(), sys.stdout)
    sys.stdout.flush()


def _read_input(stream: IO[str]) -> Tuple[PreprocessorContext, Book]:
    payload: Any = json.load(stream)
    if not isinstance(payload, list) or len(payload) != 2:
        raise ValueError("expected a JSON array of [context, book]")
    return PreprocessorContext.from_json(payload[0]), Book.from_json(payload[1])


if __name__ == "__main__":
    main(sys.argv[1:])
