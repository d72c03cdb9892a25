"""Confirmation policy use case."""

from __future__ import annotations

from sqlyac.domain.risk import RiskAssessment
from sqlyac.domain.settings import SqlyacSettings


class ConfirmationPolicy:
    """Decides whether a statement must be confirmed before it is emitted.

    Confirmation is required when any of these holds:
    - the caller forces it (``--confirm`` on the command line)
    - ``settings.confirm`` is set
    - ``settings.confirm_schema_changes`` is set and the statement changes schema
    - ``settings.confirm_updates`` is set and the statement mutates rows
    """

    def __init__(self, settings: SqlyacSettings | None = None) -> None:
        """Initialize confirmation policy.

        Args:
            settings: Confirmation switches. Defaults to SqlyacSettings().
        """
        self.settings = settings if settings is not None else SqlyacSettings()

    def requires_confirmation(
        self, assessment: RiskAssessment, force: bool = False
    ) -> bool:
        """Check if confirmation is required.

        Args:
            assessment: Classification of the final statement text.
            force: Command line override that always requires confirmation.

        Returns:
            True if the user must confirm before the statement is emitted.
        """
        if force or self.settings.confirm:
            return True
        if self.settings.confirm_schema_changes and assessment.is_schema_change:
            return True
        return self.settings.confirm_updates and assessment.is_row_mutation
