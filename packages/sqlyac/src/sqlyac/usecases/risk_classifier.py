"""Risk classification use case for deciding when to confirm a statement."""

from __future__ import annotations

from sqlyac.domain.risk import RiskAssessment

# Matched as lower-case substrings, not tokens. "truncate" alone already
# covers "truncate table"; both are listed so the set reads as the full rule.
SCHEMA_CHANGE_KEYWORDS = (
    "drop table",
    "drop database",
    "drop schema",
    "alter table",
    "alter database",
    "alter schema",
    "create table",
    "create database",
    "create schema",
    "truncate table",
    "truncate",
)

# Trailing spaces keep "updated_at" and "deleted" from matching
ROW_MUTATION_KEYWORDS = ("update ", "delete ", "delete from", "insert")


class RiskClassifier:
    """Classifies SQL text as schema-changing and/or row-mutating.

    Detection is a case-insensitive substring search. It is not comment or
    string-literal aware: ``-- DROP TABLE users`` still counts as a schema
    change, and a column literally named ``insert`` counts as a mutation.
    False positives are preferred over a statement slipping through without
    confirmation.

    Run it on interpolated text so the result reflects what will be emitted.
    """

    def is_schema_change(self, sql: str) -> bool:
        """Check if SQL text mentions a schema-altering keyword.

        Args:
            sql: SQL text, usually after interpolation.

        Returns:
            True if any of SCHEMA_CHANGE_KEYWORDS occurs in the text.
        """
        sql_lower = sql.lower()
        return any(keyword in sql_lower for keyword in SCHEMA_CHANGE_KEYWORDS)

    def is_row_mutation(self, sql: str) -> bool:
        """Check if SQL text mentions a row-mutating keyword.

        Args:
            sql: SQL text, usually after interpolation.

        Returns:
            True if any of ROW_MUTATION_KEYWORDS occurs in the text.
        """
        sql_lower = sql.lower()
        return any(keyword in sql_lower for keyword in ROW_MUTATION_KEYWORDS)

    def classify(self, sql: str) -> RiskAssessment:
        """Run both checks and return the combined assessment."""
        return RiskAssessment(
            is_schema_change=self.is_schema_change(sql),
            is_row_mutation=self.is_row_mutation(sql),
        )
