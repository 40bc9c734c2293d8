"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from docx_tables.config import ENV_HEADER_FROM_CLASSIFIER, ENV_INCLUDE_STYLES, ENV_TABLE_FORMAT

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every DOCX_TABLES_* variable so option tests start from the model defaults."""
    for name in (ENV_TABLE_FORMAT, ENV_INCLUDE_STYLES, ENV_HEADER_FROM_CLASSIFIER):
        # setenv first so monkeypatch also undoes values later written by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
