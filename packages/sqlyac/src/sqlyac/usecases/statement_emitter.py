"""Statement emitter use case: resolve, interpolate, classify, gate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlyac.domain.risk import RiskAssessment
from sqlyac.usecases.confirmation_policy import ConfirmationPolicy
from sqlyac.usecases.interpolator import VariableInterpolator
from sqlyac.usecases.risk_classifier import RiskClassifier
from sqlyac.usecases.statement_resolver import StatementResolver

if TYPE_CHECKING:
    from sqlyac.adapters.ports import ConfirmationPromptPort
    from sqlyac.domain.statement import SQLDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedStatement:
    """A statement ready to be emitted.

    Attributes:
        name: Statement name.
        text: Text after variable interpolation.
        assessment: Classification of ``text``.
        unresolved: Variable references left literal because the document
                    defines no value for them.
    """

    name: str
    text: str
    assessment: RiskAssessment
    unresolved: tuple[str, ...] = ()


class StatementEmitter:
    """Prepares a named statement and decides whether it may be emitted.

    Classification runs on the interpolated text, so a variable whose value
    contains e.g. ``DROP TABLE`` is gated like a literal one.
    """

    def __init__(
        self,
        policy: ConfirmationPolicy,
        prompt: ConfirmationPromptPort,
        interpolator: VariableInterpolator | None = None,
        classifier: RiskClassifier | None = None,
    ) -> None:
        self.policy = policy
        self._prompt = prompt
        self._interpolator = interpolator or VariableInterpolator()
        self._classifier = classifier or RiskClassifier()

    def prepare(self, document: SQLDocument, name: str) -> PreparedStatement:
        """Resolve ``name`` in ``document`` and interpolate its variables.

        Raises:
            UnknownStatementError: If no statement has that name.
        """
        statement = StatementResolver(document).resolve(name)
        text = self._interpolator.interpolate(statement.text, document.variables)
        unresolved = self._interpolator.unresolved(
            statement.text, document.variables
        )
        if unresolved:
            logger.debug(
                "Statement %s has unresolved variables: %s",
                name,
                ", ".join(unresolved),
            )

        return PreparedStatement(
            name=statement.name,
            text=text,
            assessment=self._classifier.classify(text),
            unresolved=tuple(unresolved),
        )

    def approve(self, prepared: PreparedStatement, force: bool = False) -> bool:
        """Ask for confirmation if the policy requires it.

        Args:
            prepared: Statement from prepare().
            force: Always ask, regardless of settings.

        Returns:
            True if the statement may be emitted.
        """
        if not self.policy.requires_confirmation(prepared.assessment, force=force):
            return True
        return self._prompt.confirm(prepared.name, prepared.text)
