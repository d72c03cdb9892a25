"""LoggingPort implementation backed by the standard library."""

from __future__ import annotations

import logging


class StdlibLoggingAdapter:
    """Routes LoggingPort warnings to a ``logging.Logger``.

    Args:
        logger: Logger to write to. Defaults to the ``sqlyac`` logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("sqlyac")

    def warning(self, message: str) -> None:
        self._logger.warning(message)
