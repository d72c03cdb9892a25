"""
Root conftest.py for the sqlyac test suite.

Every test carries a tier marker (its speed class) and a TRA marker naming
the sqlyac layer and component it protects:

    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.DocumentParser")
    def test_something():
        ...

Problems are printed at collection time. Set TRA_ENFORCE=1 to fail the run
instead.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# sqlyac layers a TRA anchor may name
VALID_TRA_PREFIXES = (
    "Domain.Invariant.",
    "Domain.Policy.",
    "UseCase.",
    "Port.",
    "Adapter.",
    "Contract.",
)

# Tier timeout limits in seconds
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,  # pure value objects and policies
    1: 2.0,  # parsing, files, CLI, scenarios
    3: 300.0,  # Hypothesis properties
}


def pytest_configure(config: Config) -> None:
    """Register the tier and tra markers."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): sqlyac component this test protects, "
        "e.g. UseCase.DocumentParser or Adapter.CLI",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): 0=instant, 1=fast, 3=property-based",
    )


def _get_tier(item: Item) -> int | None:
    for marker in item.iter_markers(name="tier"):
        if marker.args and marker.args[0] in TIER_TIMEOUTS:
            return marker.args[0]
    return None


def _marker_errors(item: Item) -> list[str]:
    errors = []
    marker = item.get_closest_marker("tra")
    anchor = marker.args[0] if marker and marker.args else None
    if not isinstance(anchor, str) or not anchor.startswith(VALID_TRA_PREFIXES):
        errors.append(f"{item.nodeid}: missing or invalid tra anchor {anchor!r}")
    if _get_tier(item) is None:
        errors.append(f"{item.nodeid}: missing or invalid tier")
    return errors


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check markers and apply per-tier timeouts."""
    errors = [error for item in items for error in _marker_errors(item)]
    if errors:
        if os.environ.get("TRA_ENFORCE") == "1":
            pytest.fail(
                "Marker errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nMarker warnings:")
        for error in errors:
            print(f"  {error}")

    for item in items:
        tier = _get_tier(item)
        if tier is not None and not item.get_closest_marker("timeout"):
            item.add_marker(pytest.mark.timeout(TIER_TIMEOUTS[tier]))
