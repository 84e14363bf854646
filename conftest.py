"""Pytest configuration applied to the entire test suite."""

from __future__ import annotations

# Step definitions load before feature parsing so pytest-bdd can match
# scenario text regardless of which subset of tests is collected.
pytest_plugins = [
    "tests.e2e.steps.summary",
]
