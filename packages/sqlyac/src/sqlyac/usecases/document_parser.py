"""Document parser use case for named SQL statements."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from sqlyac.domain.statement import SQLDocument, Statement

if TYPE_CHECKING:
    from sqlyac.adapters.ports import SQLSourcePort

logger = logging.getLogger(__name__)

# Pre-compiled line patterns, checked in LineKind order
_VARIABLE_RE = re.compile(
    r"^\s*SET\s+@(\w+)\s*=(?!\s*;?\s*$)\s*(.+?)\s*;?\s*$", re.IGNORECASE
)
_DELIMITER_RE = re.compile(r"^-{3,}$")
_NAME_RE = re.compile(r"--\s*@name\s*(\w+)")
_COMMENT_PREFIX = "--"


class LineKind(Enum):
    """Classification of a single document line.

    Members are declared in matching priority: a line is given the first
    kind whose pattern it satisfies.

    Attributes:
        VARIABLE: ``SET @name = value`` definition.
        DELIMITER: Three or more dashes and nothing else.
        NAME: Comment carrying an ``@name`` annotation.
        COMMENT: Any other line starting with ``--``.
        CONTENT: Everything else.
    """

    VARIABLE = "variable"
    DELIMITER = "delimiter"
    NAME = "name"
    COMMENT = "comment"
    CONTENT = "content"


@dataclass
class _Block:
    """Statement being accumulated between two delimiters."""

    name: str = ""
    lines: list[str] = field(default_factory=list)

    def finish(self) -> Statement | None:
        """Build the statement, or None if the block was never named."""
        if not self.name:
            return None
        return Statement(name=self.name, text="\n".join(self.lines).strip())


def classify_line(line: str) -> tuple[LineKind, re.Match[str] | None]:
    """Classify a line and return the match that decided it.

    The match is None for DELIMITER, COMMENT and CONTENT lines.
    """
    match = _VARIABLE_RE.match(line)
    if match:
        return LineKind.VARIABLE, match

    stripped = line.strip()
    if _DELIMITER_RE.match(stripped):
        return LineKind.DELIMITER, None

    match = _NAME_RE.search(line)
    if match:
        return LineKind.NAME, match

    if stripped.startswith(_COMMENT_PREFIX):
        return LineKind.COMMENT, None

    return LineKind.CONTENT, None


class DocumentParser:
    """Parses a document of delimiter-separated, ``@name``-annotated SQL.

    Example document::

        SET @user_id = 123;

        ---
        -- @name GetUser
        SELECT * FROM users WHERE id = @user_id;
        ---

    One linear pass builds both the statement list and the variable table.
    Blocks without an ``@name`` annotation are dropped, the last ``@name``
    in a block wins, and comment lines never reach statement text.
    Malformed input degrades gracefully; only reading the file can fail.
    """

    def __init__(self, source: SQLSourcePort | None = None) -> None:
        """Initialize document parser.

        Args:
            source: Port used by parse_file(). Defaults to SQLFileReader.
        """
        if source is None:
            from sqlyac.adapters.sql_file_reader import SQLFileReader

            source = SQLFileReader()
        self._source = source

    def parse_file(self, path: str) -> SQLDocument:
        """Read and parse the document at ``path``.

        Raises:
            SQLFileNotFoundError: If the file cannot be opened or read.
        """
        logger.debug("Parsing SQL document %s", path)
        return self.parse(self._source.read(path))

    def parse(self, text: str) -> SQLDocument:
        """Parse document text.

        Args:
            text: Full document text.

        Returns:
            SQLDocument with statements in file order and the variable table.
        """
        # Only \n (or \r\n) ends a line; other separators stay in the text
        return self.parse_lines(line.removesuffix("\r") for line in text.split("\n"))

    def parse_lines(self, lines: Iterable[str]) -> SQLDocument:
        """Parse an iterable of lines without trailing newlines."""
        statements: list[Statement] = []
        variables: dict[str, str] = {}
        block = _Block()

        for line in lines:
            kind, match = classify_line(line)

            if kind is LineKind.VARIABLE:
                assert match is not None
                variables[match.group(1)] = match.group(2).strip()
            elif kind is LineKind.DELIMITER:
                self._close(block, statements)
                block = _Block()
            elif kind is LineKind.NAME:
                assert match is not None
                block.name = match.group(1)
            elif kind is LineKind.CONTENT:
                block.lines.append(line)

        self._close(block, statements)

        logger.debug(
            "Found %d statements and %d variables", len(statements), len(variables)
        )
        return SQLDocument(statements=tuple(statements), variables=variables)

    def _close(self, block: _Block, statements: list[Statement]) -> None:
        """Append the block's statement, if it has a name."""
        statement = block.finish()
        if statement is not None:
            statements.append(statement)
        elif any(line.strip() for line in block.lines):
            logger.debug("Discarding block without @name annotation")
