from __future__ import annotations

import os
import sqlite3
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.aggregate_companies'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached per process; tests monkeypatch env between cases
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def conn(tmp_path):
    from db import schema
    db = sqlite3.connect(str(tmp_path / "t.db"))
    schema.bootstrap(db)
    try:
        yield db
    finally:
        db.close()
