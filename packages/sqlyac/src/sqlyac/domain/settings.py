"""sqlyac settings domain entity."""

from dataclasses import dataclass, fields

from sqlyac.domain.exceptions import SqlyacConfigError


@dataclass(frozen=True)
class SqlyacSettings:
    """Confirmation switches for emitting a statement.

    Value object with zero external dependencies. The defaults apply when no
    configuration file exists, or when a file leaves a key out.

    Attributes:
        confirm: Ask before emitting every statement. Defaults to False.
        confirm_schema_changes: Ask before emitting statements that create,
                                alter, drop or truncate tables, schemas or
                                databases. Defaults to True.
        confirm_updates: Ask before emitting statements that insert, update
                         or delete rows. Defaults to True.
    """

    confirm: bool = False
    confirm_schema_changes: bool = True
    confirm_updates: bool = True

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate_switches()

    def _validate_switches(self) -> None:
        """Validate that every switch is a real boolean."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise SqlyacConfigError(
                    f"{f.name} must be a boolean, got: {value!r}"
                )
