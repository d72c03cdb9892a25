"""Domain exceptions.

Exception hierarchy:
- SqlyacError: Base exception for everything raised by sqlyac.
  - SQLFileNotFoundError: The SQL document could not be opened or read.
  - UnknownStatementError: No statement in the document has the requested name.
  - SqlyacConfigError: The configuration file is malformed or holds bad values.

Malformed annotations, unmatched delimiters, duplicate statement names and
unresolved variable references are not errors and never raise.
"""

from __future__ import annotations


class SqlyacError(Exception):
    """Base exception for sqlyac.

    The command line surface catches this and converts it to an error
    message and a non-zero exit code. Use cases never catch it themselves.
    """

    pass


class SQLFileNotFoundError(SqlyacError):
    """Raised when a SQL document cannot be opened or read.

    Attributes:
        path: Path of the file that could not be read.
        original_error: The underlying OSError or decoding error, if any.
    """

    def __init__(
        self,
        path: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize SQLFileNotFoundError.

        Args:
            path: Path of the file that could not be read.
            original_error: The exception that caused the failure.
        """
        reason = getattr(original_error, "strerror", None) or original_error
        message = f"cannot read {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class UnknownStatementError(SqlyacError):
    """Raised when a requested statement name matches nothing in the document.

    Attributes:
        name: The statement name that was requested.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"query '{name}' not found")
        self.name = name


class SqlyacConfigError(SqlyacError):
    """Raised when the configuration file is invalid."""

    pass
