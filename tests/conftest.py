"""Test configuration and fixtures for the entire test suite."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv


# Add the project root to the Python path
@pytest.fixture(scope="session", autouse=True)
def setup_path() -> None:
    """Add the project root to the Python path."""
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

    # Load environment variables from .env file
    load_dotenv()


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GDAX_* variables from a developer's shell out of the tests."""
    monkeypatch.delenv("GDAX_BASE_URL", raising=False)
    monkeypatch.delenv("GDAX_TIMEOUT", raising=False)
    monkeypatch.delenv("GDAX_USER_AGENT", raising=False)
    monkeypatch.delenv("GDAX_LOG_LEVEL", raising=False)
