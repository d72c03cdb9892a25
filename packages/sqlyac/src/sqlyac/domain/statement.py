"""Statement and document value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Statement:
    """A named SQL statement extracted from a document.

    Value object with zero external dependencies. Instances are immutable
    and compare by value.

    Attributes:
        name: Identifier from the block's ``@name`` annotation. Letters,
              digits and underscores only, never empty.
        text: Content lines of the block joined with newlines, stripped of
              leading and trailing whitespace. Variables are not yet
              substituted.
    """

    name: str
    text: str


@dataclass(frozen=True)
class SQLDocument:
    """Result of parsing a SQL document.

    Holds the statements in file order and the flat variable table built
    from every ``SET @name = value`` line in the file.

    Attributes:
        statements: Named statements in the order they appear. Duplicate
                    names are kept.
        variables: Variable name (without ``@``) to its literal value text,
                   exactly as written, quotes included. Read-only.
    """

    statements: tuple[Statement, ...] = ()
    variables: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the variable table."""
        object.__setattr__(
            self, "variables", MappingProxyType(dict(self.variables))
        )

    def names(self) -> list[str]:
        """Return statement names in file order, duplicates included."""
        return [statement.name for statement in self.statements]

    def find(self, name: str) -> Statement | None:
        """Return the first statement named ``name``, or None."""
        for statement in self.statements:
            if statement.name == name:
                return statement
        return None

    def __len__(self) -> int:
        return len(self.statements)
