"""Domain layer: Entities with zero external dependencies."""

from sqlyac.domain.statement import Statement, SQLDocument
from sqlyac.domain.settings import SqlyacSettings
from sqlyac.domain.risk import RiskAssessment
from sqlyac.domain.exceptions import (
    SqlyacError,
    SQLFileNotFoundError,
    UnknownStatementError,
    SqlyacConfigError,
)

__all__ = [
    "Statement",
    "SQLDocument",
    "SqlyacSettings",
    "RiskAssessment",
    "SqlyacError",
    "SQLFileNotFoundError",
    "UnknownStatementError",
    "SqlyacConfigError",
]
