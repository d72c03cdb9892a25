"""Risk assessment domain value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RiskAssessment:
    """Heuristic classification of what a statement would do if run.

    Both flags can be set at once, e.g. for a document that creates a table
    and then fills it.

    Attributes:
        is_schema_change: Text mentions a create/alter/drop/truncate keyword
                          pair for a table, schema or database.
        is_row_mutation: Text mentions insert, update or delete.
    """

    is_schema_change: bool
    is_row_mutation: bool

    @property
    def is_read_only(self) -> bool:
        """True when neither flag is set."""
        return not (self.is_schema_change or self.is_row_mutation)
