"""Filesystem adapter for the sqlyac configuration file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sqlyac.adapters.logging_adapter import StdlibLoggingAdapter
from sqlyac.domain.exceptions import SqlyacConfigError
from sqlyac.domain.settings import SqlyacSettings
from sqlyac.usecases.config_parser import FORMAT_JSON, FORMAT_YAML, ConfigParser

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".sqlyac"
CONFIG_FILE_NAMES = ("config.json", "config.yaml")
CONFIG_ENV_VAR = "SQLYAC_CONFIG"


def config_format(path: Path) -> str:
    """Return the parser format for a config path, by suffix."""
    return FORMAT_JSON if path.suffix.lower() == ".json" else FORMAT_YAML


class FileSettingsSource:
    """Loads settings from ``~/.sqlyac/config.json`` (or ``config.yaml``).

    Implements SettingsSourcePort. The ``SQLYAC_CONFIG`` environment variable
    names an explicit file and takes precedence over the home directory
    lookup.

    Attributes:
        home: Directory holding ``.sqlyac/``. Defaults to the user's home.
    """

    def __init__(
        self,
        home: Path | None = None,
        parser: ConfigParser | None = None,
    ) -> None:
        self.home = home
        self._parser = parser or ConfigParser(logger=StdlibLoggingAdapter(logger))

    def candidate_paths(self) -> list[Path]:
        """Return the config file locations to try, in order."""
        explicit = os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            return [Path(explicit).expanduser()]

        home = self.home if self.home is not None else Path.home()
        config_dir = home / CONFIG_DIR_NAME
        return [config_dir / name for name in CONFIG_FILE_NAMES]

    def load(self) -> SqlyacSettings | None:
        """Load settings from the first config file that exists.

        Returns:
            Parsed settings, or None if no config file exists.

        Raises:
            SqlyacConfigError: If the file exists but cannot be read or parsed.
        """
        for path in self.candidate_paths():
            if not path.is_file():
                continue

            logger.debug("Loading config from %s", path)
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise SqlyacConfigError(f"Cannot read config {path}: {e}") from e
            return self._parser.parse(text, fmt=config_format(path))

        logger.debug("No config file found, using defaults")
        return None
