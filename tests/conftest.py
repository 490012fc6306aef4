"""Pytest configuration and fixtures for pydeckcore tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pydeckcore.core.dates import make_date
from pydeckcore.core.timeline import Timeline


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "property: Hypothesis property-based tests")


@pytest.fixture
def fixtures_path() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_deck_path(fixtures_path: Path) -> Path:
    """Return path to the sample schedule deck."""
    return fixtures_path / "schedule.data"


@pytest.fixture
def schedule_lines() -> list[str]:
    """A small deck mixing temporal and other keywords.

    Report steps::

        0  2000-01-01
        1  2000-01-11   TSTEP 10
        2  2000-01-16   TSTEP 5
        3  2000-02-01   DATES
        4  2000-03-01   DATES
        5  2001-01-01   DATES
    """
    return [
        "-- Sample deck",
        "RUNSPEC",
        "TITLE",
        "  'Sample model' /",
        "START",
        "  1 JAN 2000 /",
        "",
        "SCHEDULE",
        "TSTEP",
        "  10 5 /",
        "DATES",
        "  1 FEB 2000 /",
        "  1 'MAR' 2000 /  -- quoted month",
        "  1 JAN 2001 /",
        "/",
        "END",
    ]


@pytest.fixture
def monthly_timeline() -> Timeline:
    """Timeline starting 1 JAN 2000 with one step per month for a year."""
    timeline = Timeline(make_date(2000, 1, 1))
    for month in range(2, 13):
        timeline.add_time(make_date(2000, month, 1))
    timeline.add_time(make_date(2001, 1, 1))
    return timeline
