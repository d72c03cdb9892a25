"""sqlyac: Named SQL statements in plain files, one at a time to stdout."""

__version__ = "0.1.0"

from sqlyac.domain.statement import Statement, SQLDocument
from sqlyac.domain.settings import SqlyacSettings
from sqlyac.domain.exceptions import (
    SqlyacError,
    SQLFileNotFoundError,
    UnknownStatementError,
    SqlyacConfigError,
)
from sqlyac.usecases.document_parser import DocumentParser
from sqlyac.usecases.interpolator import VariableInterpolator
from sqlyac.usecases.risk_classifier import RiskClassifier

__all__ = [
    "Statement",
    "SQLDocument",
    "SqlyacSettings",
    "SqlyacError",
    "SQLFileNotFoundError",
    "UnknownStatementError",
    "SqlyacConfigError",
    "DocumentParser",
    "VariableInterpolator",
    "RiskClassifier",
]
