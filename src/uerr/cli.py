"""Public CLI contract and entrypoint."""

from __future__ import annotations

import argparse
import logging as py_logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .config import load_config
from .errors import ExitCode, UserError
from .logging import VALID_LOG_LEVELS, configure_logging, normalize_level

_CLI_PREFIX = "uerr: error: "


def _exit_code_type(value: str) -> int:
    try:
        code = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("--exit-code must be an integer") from exc
    if code < 0 or code > 255:
        raise argparse.ArgumentTypeError("--exit-code must be between 0 and 255")
    return code


def _log_level_type(value: str) -> str:
    normalized = normalize_level(value)
    if normalized not in VALID_LOG_LEVELS:
        accepted = ", ".join(VALID_LOG_LEVELS)
        raise argparse.ArgumentTypeError(f"--log-level must be one of: {accepted}")
    return normalized


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uerr",
        description="Print a human-readable error with reasons and help tips to stderr.",
    )
    parser.add_argument("message")
    parser.add_argument(
        "--reason",
        dest="reasons",
        action="append",
        default=[],
        metavar="TEXT",
        help="Add a reason (repeatable, rendered in order)",
    )
    parser.add_argument(
        "--tip",
        dest="tips",
        action="append",
        default=[],
        metavar="TEXT",
        help="Add a help tip (repeatable, rendered in order)",
    )
    parser.add_argument("--prefix", default=None, help="Text printed before the message")
    parser.add_argument("--exit-code", type=_exit_code_type, default=None)
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--log-level", type=_log_level_type, default=None)
    parser.add_argument("--log-file", type=Path, default=None)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)


def build_error(namespace: argparse.Namespace) -> UserError:
    return UserError(namespace.message, reasons=namespace.reasons, help=namespace.tips)


def main(argv: Sequence[str] | None = None, *, stream: TextIO | None = None) -> int:
    logger = configure_logging(stream=stream)
    parser = build_parser()
    try:
        namespace = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code not in (None, 0):
            logger.warning("Argument parsing failed with exit code %s", exc.code)
        return int(exc.code) if exc.code else int(ExitCode.SUCCESS)

    try:
        config = load_config(namespace.config, strict=namespace.config is not None)
    except UserError as exc:
        exc.print_all(_CLI_PREFIX, stream=stream)
        return int(ExitCode.CONFIG_ERROR)

    log_file = namespace.log_file or (Path(config.log_file) if config.log_file else None)
    logger = configure_logging(
        level=namespace.log_level or config.log_level,
        stream=stream,
        log_file=log_file,
    )

    prefix = namespace.prefix if namespace.prefix is not None else config.prefix
    code = namespace.exit_code if namespace.exit_code is not None else config.exit_code
    error = build_error(namespace)
    logger.debug("Reporting user error (code=%s): %s", code, error.message)
    error.print_all(prefix, stream=stream)
    if logger.isEnabledFor(py_logging.DEBUG):
        logger.debug("Rendered block:\n%s", error.render(prefix).rstrip("\n"))
    return code


def run(argv: Sequence[str] | None = None) -> int:
    return main(argv)
