"""Filesystem adapter for reading SQL documents."""

from __future__ import annotations

from pathlib import Path

from sqlyac.domain.exceptions import SQLFileNotFoundError


class SQLFileReader:
    """Reads SQL documents from the local filesystem.

    Implements SQLSourcePort. The whole file is read into memory.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: str) -> str:
        """Read the document at ``path``.

        Raises:
            SQLFileNotFoundError: If the file is missing, unreadable, a
                directory, or not valid text in the configured encoding.
        """
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SQLFileNotFoundError(path, original_error=e) from e
