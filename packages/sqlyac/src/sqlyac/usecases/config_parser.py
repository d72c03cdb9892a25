"""Config parser use case for sqlyac."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import yaml

from sqlyac.domain.exceptions import SqlyacConfigError
from sqlyac.domain.settings import SqlyacSettings

if TYPE_CHECKING:
    from sqlyac.adapters.ports import LoggingPort

# Keys understood in the configuration file, all optional
KNOWN_KEYS = ("confirm", "confirm_schema_changes", "confirm_updates")

# Supported document formats
FORMAT_JSON = "json"
FORMAT_YAML = "yaml"


class ConfigParser:
    """Parses a sqlyac configuration document to settings.

    ``config.json`` bodies are read with ``json.loads`` and ``config.yaml``
    bodies with ``yaml.safe_load``. Both must hold a flat mapping such as
    ``{"confirm": false, "confirm_schema_changes": true}``.
    """

    def __init__(self, logger: LoggingPort | None = None) -> None:
        """Initialize config parser.

        Args:
            logger: Optional port that receives a warning per unknown key.
        """
        self._logger = logger

    def parse(self, text: str, fmt: str = FORMAT_YAML) -> SqlyacSettings:
        """Parse configuration text to settings.

        Args:
            text: Body of the configuration file.
            fmt: Document format, ``"json"`` or ``"yaml"``.

        Returns:
            SqlyacSettings with defaults for any key the document leaves out.

        Raises:
            SqlyacConfigError: If the document does not parse in ``fmt``, is
                not a mapping, or holds a non-boolean value for a known key.
        """
        config = self._load(text, fmt)

        # Empty document
        if config is None:
            return SqlyacSettings()

        if not isinstance(config, dict):
            raise SqlyacConfigError("Config must be a mapping")

        unknown = sorted(str(key) for key in config if key not in KNOWN_KEYS)
        if unknown and self._logger is not None:
            self._logger.warning(
                f"Ignoring unknown config keys: {', '.join(unknown)}"
            )

        # SqlyacSettings validates types in __post_init__
        return SqlyacSettings(
            **{key: config[key] for key in KNOWN_KEYS if key in config}
        )

    def _load(self, text: str, fmt: str) -> Any:
        if fmt == FORMAT_JSON:
            if not text.strip():
                return None
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise SqlyacConfigError(f"Invalid config: {e}") from e

        if fmt == FORMAT_YAML:
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise SqlyacConfigError(f"Invalid config: {e}") from e

        raise SqlyacConfigError(f"Unsupported config format: {fmt}")
