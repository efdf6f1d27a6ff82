"""Shared fixtures for figsync tests."""

from pathlib import Path

import pytest

from figsync.host.snapshot import SnapshotHost
from figsync.io.reader import load_snapshot

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def snapshot_path() -> Path:
    """Path to the sample design snapshot."""
    return FIXTURES_DIR / "design_snapshot.json"


@pytest.fixture
def snapshot_host(snapshot_path: Path) -> SnapshotHost:
    """Host serving the sample design snapshot."""
    return load_snapshot(snapshot_path)
