"""Interface adapters: File, console and logging I/O."""

from sqlyac.adapters.ports import (
    SQLSourcePort,
    SettingsSourcePort,
    ConfirmationPromptPort,
    LoggingPort,
)
from sqlyac.adapters.sql_file_reader import SQLFileReader
from sqlyac.adapters.file_settings_source import FileSettingsSource
from sqlyac.adapters.console_prompt import ConsolePrompt
from sqlyac.adapters.logging_adapter import StdlibLoggingAdapter

__all__ = [
    "SQLSourcePort",
    "SettingsSourcePort",
    "ConfirmationPromptPort",
    "LoggingPort",
    "SQLFileReader",
    "FileSettingsSource",
    "ConsolePrompt",
    "StdlibLoggingAdapter",
]
