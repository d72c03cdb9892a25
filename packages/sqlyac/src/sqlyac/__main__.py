"""Allow ``python -m sqlyac``."""

from sqlyac.cli import run

run()
