"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["DEBUG"] = "true"
os.environ.pop("SHEETS_WEBAPP_URL", None)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def base_date() -> date:
    return date(2025, 1, 15)


@pytest.fixture
def sample_table() -> dict:
    """Order table with only non-zero quantities."""
    return {
        "tofu": {
            '9"': {"2025-01-14": 3, "2025-01-15": 4},
            '8"': {"2025-01-16": 2},
        },
        "yuzu": {
            "SS 6\"": {"2025-01-13": 1},
            "SS sliced": {"2025-01-20": 6},
        },
    }


@pytest.fixture
def sheet_payload() -> dict:
    """Document as returned by the Apps Script web app."""
    return {
        "header": ["Item", "2025-01-15", "2025-01-16"],
        "rows": [
            {"item": 'tofu 9"', "values": [4, ""]},
            {"item": "yuzu SS sliced", "values": ["2", 0]},
        ],
    }


@pytest.fixture
def api_client() -> Generator[TestClient, None, None]:
    """Create a FastAPI test client."""
    from api.main import app

    with TestClient(app) as client:
        yield client
