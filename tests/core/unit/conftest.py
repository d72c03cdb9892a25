"""Pytest configuration and shared fixtures for sqlyac core unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sqlyac.usecases.document_parser import DocumentParser


@pytest.fixture
def parser() -> DocumentParser:
    """Create a DocumentParser reading from the real filesystem."""
    return DocumentParser()


@pytest.fixture
def write_sql(tmp_path: Path):
    """Write SQL text to a temporary ``.sql`` file and return its path."""

    def _write(text: str, name: str = "queries.sql") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
