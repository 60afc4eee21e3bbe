from datetime import UTC, datetime
from pathlib import Path

import pytest

from fiprofile.adapters.clock import FrozenClock
from fiprofile.adapters.sqlite_store import SQLiteBlobStore
from fiprofile.rules.loader import load_rules

NOW = datetime(2025, 10, 5, 12, 0, tzinfo=UTC)


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def rules(project_root):
    """Rules loaded from the shipped rules.yaml."""
    return load_rules(project_root / "rules.yaml")


@pytest.fixture
def clock():
    return FrozenClock(NOW)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "fiprofile.db")


@pytest.fixture
def sqlite_store(db_path):
    return SQLiteBlobStore(db_path)


@pytest.fixture
def base_input():
    """A mid-career profile: Growth stage, Standard category."""
    return {
        "income": {"gross": 100000, "net": 75000},
        "expenses": {"annual": 50000, "monthly": 4167},
        "investments": {"annual": 15000, "monthly": 1250},
        "netWorth": 200000,
        "debt": 25000,
        "age": 30,
    }
