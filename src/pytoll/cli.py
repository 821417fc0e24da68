"""Command-line entry point.

Usage
-----
    pytoll < crossings.txt
    pytoll --debug --report-unfinished < crossings.txt

Environment variables ``TOLL_REPORT_UNFINISHED``, ``TOLL_ENCODING`` and
``TOLL_DEBUG`` are read first; command-line flags override them.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from pytoll.config import TollConfig
from pytoll.dispatcher import LineDispatcher
from pytoll.exceptions import TollConfigError, TollInputError
from pytoll.state.ledger import Ledger

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pytoll",
        description="Read toll crossing records from stdin and answer '?' queries.",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")
    parser.add_argument(
        "--report-unfinished",
        action="store_true",
        default=None,
        help="Report crossings still open when input ends",
    )
    return parser


def _prepare_stdin(encoding: str) -> TextIO:
    # Undecodable bytes become lone surrogates, so the line is rejected
    # on its own instead of ending the run.  Split on "\n" only so a stray
    # "\r" stays part of the line text.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding=encoding, errors="surrogateescape", newline="\n")
    return sys.stdin


def _prepare_stderr(encoding: str) -> TextIO:
    # Echo rejected lines byte for byte, surrogates included.
    if isinstance(sys.stderr, io.TextIOWrapper):
        sys.stderr.reconfigure(encoding=encoding, errors="surrogateescape")
    return sys.stderr


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    out = stdout if stdout is not None else sys.stdout

    overrides: dict[str, Any] = {}
    if args.debug is not None:
        overrides["debug"] = args.debug
    if args.report_unfinished is not None:
        overrides["report_unfinished"] = args.report_unfinished

    try:
        config = TollConfig.from_env(**overrides)
    except TollConfigError as exc:
        print(f"pytoll: {exc}", file=stderr if stderr is not None else sys.stderr)
        return 2

    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    err = stderr if stderr is not None else _prepare_stderr(config.encoding)
    source = stdin if stdin is not None else _prepare_stdin(config.encoding)
    dispatcher = LineDispatcher(Ledger(), out=out, err=err, config=config)
    try:
        count = dispatcher.run(source)
    except TollInputError as exc:
        _logger.error("%s", exc)
        print(f"pytoll: {exc}", file=err)
        return 1
    _logger.debug("Processed %d line(s)", count)
    return 0
