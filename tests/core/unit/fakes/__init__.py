"""Fake adapters for unit testing."""

from tests.core.unit.fakes.fake_confirmation_prompt import FakeConfirmationPrompt
from tests.core.unit.fakes.fake_logging_adapter import FakeLoggingAdapter
from tests.core.unit.fakes.fake_settings_source import FakeSettingsSource

__all__ = [
    "FakeConfirmationPrompt",
    "FakeLoggingAdapter",
    "FakeSettingsSource",
]
