"""Shared pytest fixtures and test helpers for placectl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from placectl.domain.place import Place
from placectl.domain.types import PlaceType


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config or env overrides."""
    for var in (
        "PLACECTL_CONFIG",
        "PLACECTL_JSON_OUTPUT",
        "PLACECTL_QUIET",
        "PLACECTL_VERBOSE",
        "PLACECTL_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def springfield_apartment() -> Place:
    """APARTMENT 12 → BUILDING 5 → STREET Oak → CITY Springfield."""
    return Place.chain(
        [
            (PlaceType.APARTMENT, "12"),
            (PlaceType.BUILDING, "5"),
            (PlaceType.STREET, "Oak"),
            (PlaceType.CITY, "Springfield"),
        ]
    )
