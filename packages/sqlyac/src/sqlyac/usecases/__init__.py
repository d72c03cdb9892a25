"""Use cases: Application logic layer."""

from sqlyac.usecases.document_parser import DocumentParser, LineKind, classify_line
from sqlyac.usecases.interpolator import VariableInterpolator
from sqlyac.usecases.risk_classifier import RiskClassifier
from sqlyac.usecases.statement_resolver import StatementResolver
from sqlyac.usecases.confirmation_policy import ConfirmationPolicy
from sqlyac.usecases.config_parser import ConfigParser
from sqlyac.usecases.preview import StatementPreview
from sqlyac.usecases.statement_emitter import PreparedStatement, StatementEmitter

__all__ = [
    "DocumentParser",
    "LineKind",
    "classify_line",
    "VariableInterpolator",
    "RiskClassifier",
    "StatementResolver",
    "ConfirmationPolicy",
    "ConfigParser",
    "StatementPreview",
    "PreparedStatement",
    "StatementEmitter",
]
