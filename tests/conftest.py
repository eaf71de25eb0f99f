"""Pytest configuration and shared fixtures."""

from io import StringIO

from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.console import Console

from src.data.blocks.store import RecordStore
from src.helpers.config import ScanConfig
from tests.factories import BEACON_URL, EXPLORER_URL


@pytest.fixture
def record_path(tmp_path: Path) -> Path:
    """Location of a not-yet-created block record."""
    return tmp_path / "block-record.csv"


@pytest.fixture
def store(record_path: Path) -> Iterator[RecordStore]:
    """Fresh record store, closed after the test."""
    with RecordStore(record_path) as record_store:
        yield record_store


@pytest.fixture
def quiet_console() -> Console:
    """Console writing to memory."""
    return Console(file=StringIO())


@pytest.fixture
def scan_config(tmp_path: Path) -> ScanConfig:
    """Slots 1-3 with every file inside tmp_path."""
    return ScanConfig(
        from_slot=1,
        to_slot=3,
        graffiti_pattern="dappnode",
        record_file=str(tmp_path / "block-record.csv"),
        indexes_output=str(tmp_path / "validatorIndexes.txt"),
        addresses_output=str(tmp_path / "addresses.txt"),
        beacon_node_url=BEACON_URL,
        beaconchain_url=EXPLORER_URL,
    )
