# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - make_record          → factory for Record with sensible defaults
# - ratio_records        → 500 records with sales ratios 1..500
# - sales_csv            → writes records to a CSV under tmp_path
# - isolated_config      → (autouse) no cached config, no env leakage
#
# ==============================================

import pytest

from src.config import reset_config
from src.records import Record, write_records


CONFIG_ENV_VARS = ["INPUT_PATH", "OUTPUT_PATH", "SAMPLE_SIZE", "RANDOM_SEED", "NUMBER_OF_BINS"]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Every test starts with a fresh config and a clean environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_record():
    """Factory for Records; any field can be overridden."""
    def _make(
        serial_number="X",
        assessed_value=100_000.0,
        sale_amount=200_000.0,
        sales_ratio=0.5,
        residential_type="Single Family",
    ):
        return Record(
            serial_number=serial_number,
            assessed_value=assessed_value,
            sale_amount=sale_amount,
            sales_ratio=sales_ratio,
            residential_type=residential_type,
        )
    return _make


@pytest.fixture
def ratio_records(make_record):
    """500 records whose sales ratios are 1.0 .. 500.0."""
    return [
        make_record(serial_number=str(i), sales_ratio=float(i), residential_type="Type")
        for i in range(1, 501)
    ]


@pytest.fixture
def sales_csv(tmp_path):
    """Write records to tmp_path/<name> and return the path."""
    def _write(records, name="sales.csv"):
        path = tmp_path / name
        write_records(records, path)
        return path
    return _write
