"""Command line entry point for sqlyac.

Usage::

    sqlyac queries.sql                 # list statement names
    sqlyac queries.sql GetActiveUsers  # print one statement
    sqlyac --file queries.sql --name GetActiveUsers --confirm | psql

The statement goes to stdout with no trailing newline added; everything else
(listings, prompts, errors) goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from sqlyac.adapters.console_prompt import ConsolePrompt
from sqlyac.adapters.file_settings_source import FileSettingsSource
from sqlyac.adapters.ports import ConfirmationPromptPort, SettingsSourcePort
from sqlyac.domain.exceptions import (
    SqlyacConfigError,
    SQLFileNotFoundError,
    UnknownStatementError,
)
from sqlyac.domain.settings import SqlyacSettings
from sqlyac.usecases.confirmation_policy import ConfirmationPolicy
from sqlyac.usecases.document_parser import DocumentParser
from sqlyac.usecases.statement_emitter import StatementEmitter

logger = logging.getLogger("sqlyac")

EXIT_OK = 0
EXIT_FAILURE = 1

USAGE = "usage: sqlyac <filepath> [--name <queryname>]\n"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sqlyac",
        description="Print one named statement from a SQL file.",
    )
    parser.add_argument("--file", dest="file", default="", help="path to sql file")
    parser.add_argument(
        "--name", dest="name", default="", help="name of query to extract"
    )
    parser.add_argument(
        "--confirm",
        action="store_true",
        dest="confirm",
        help="prompt for confirmation before executing query (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="log parsing and config details to stderr",
    )
    parser.add_argument("args", nargs="*", metavar="FILE [NAME]")
    return parser


def configure_logging(verbose: bool, stream: TextIO | None = None) -> None:
    """Send log records to stderr, DEBUG for sqlyac when verbose."""
    logging.basicConfig(
        stream=stream or sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def load_settings(source: SettingsSourcePort) -> SqlyacSettings:
    """Load settings, falling back to defaults when none can be loaded."""
    try:
        settings = source.load()
    except SqlyacConfigError as e:
        logger.warning("Ignoring config: %s", e)
        return SqlyacSettings()
    return settings if settings is not None else SqlyacSettings()


def main(
    argv: Sequence[str] | None = None,
    settings_source: SettingsSourcePort | None = None,
    prompt: ConfirmationPromptPort | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the command and return its exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    options = build_parser().parse_args(argv)
    configure_logging(options.verbose, stderr)

    # Positional arguments fill in whatever the flags left empty
    path = options.file
    name = options.name
    if not path and options.args:
        path = options.args[0]
    if not name and len(options.args) > 1:
        name = options.args[1]

    if not path:
        stderr.write(USAGE)
        return EXIT_OK

    if not path.endswith(".sql"):
        stderr.write("error: file must have .sql extension\n")
        return EXIT_FAILURE

    try:
        document = DocumentParser().parse_file(path)
    except SQLFileNotFoundError as e:
        stderr.write(f"error parsing sql: {e}\n")
        return EXIT_FAILURE

    if not name:
        stderr.write("available queries:\n")
        for statement_name in document.names():
            stderr.write(f"  {statement_name}\n")
        return EXIT_OK

    settings = load_settings(settings_source or FileSettingsSource())
    emitter = StatementEmitter(
        policy=ConfirmationPolicy(settings),
        prompt=prompt or ConsolePrompt(stderr=stderr),
    )

    try:
        prepared = emitter.prepare(document, name)
    except UnknownStatementError as e:
        stderr.write(f"error: {e}\n")
        return EXIT_FAILURE

    if not emitter.approve(prepared, force=options.confirm):
        stderr.write("cancelled\n")
        return EXIT_FAILURE

    stdout.write(prepared.text)
    stdout.flush()
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
