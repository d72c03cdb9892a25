"""Statement resolver use case."""

from __future__ import annotations

from sqlyac.domain.exceptions import UnknownStatementError
from sqlyac.domain.statement import SQLDocument, Statement


class StatementResolver:
    """Looks up statements in a parsed document by exact name."""

    def __init__(self, document: SQLDocument) -> None:
        self.document = document

    def available_names(self) -> list[str]:
        """Return statement names in file order, duplicates included."""
        return self.document.names()

    def resolve(self, name: str) -> Statement:
        """Return the first statement named ``name``.

        Raises:
            UnknownStatementError: If no statement has that name.
        """
        statement = self.document.find(name)
        if statement is None:
            raise UnknownStatementError(name)
        return statement
