"""Port interfaces for the sqlyac core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlyac.domain.settings import SqlyacSettings


@runtime_checkable
class SQLSourcePort(Protocol):
    """Port interface for reading a SQL document.

    Contract:
        - read(path) returns the full text of the document
        - Raises SQLFileNotFoundError if the document cannot be opened or read
    """

    def read(self, path: str) -> str:
        """Read the whole document.

        Args:
            path: Location of the document.

        Returns:
            The document text.

        Raises:
            SQLFileNotFoundError: If the document cannot be opened or read.
        """
        ...


@runtime_checkable
class SettingsSourcePort(Protocol):
    """Port interface for loading confirmation settings.

    Contract:
        - load() returns SqlyacSettings when a configuration exists
        - load() returns None when no configuration exists; the caller
          falls back to SqlyacSettings() defaults
        - May raise SqlyacConfigError if the configuration is malformed
    """

    def load(self) -> SqlyacSettings | None:
        """Load settings.

        Returns:
            Settings from the configuration, or None if there is none.

        Raises:
            SqlyacConfigError: If the configuration exists but is invalid.
        """
        ...


@runtime_checkable
class ConfirmationPromptPort(Protocol):
    """Port interface for asking the user whether to emit a statement.

    Contract:
        - confirm(name, text) blocks until the user answers
        - Returns True only for an explicit yes
        - End of input counts as no
    """

    def confirm(self, name: str, text: str) -> bool:
        """Ask whether the statement should be emitted.

        Args:
            name: Name of the statement.
            text: Final (interpolated) statement text.

        Returns:
            True if the user answered yes, False otherwise.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for structured logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases that need to emit warnings
    (e.g., unknown configuration keys).

    Contract:
        - warning(message) logs a warning-level message
        - warning() is fire-and-forget (no return value, no exceptions propagated)
    """

    def warning(self, message: str) -> None:
        """Log a warning message.

        Args:
            message: The warning message to log.
        """
        ...
