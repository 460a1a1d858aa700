# ABOUTME: Shared pytest fixtures for isbn-resolver tests.
# ABOUTME: Keeps tests hermetic by clearing API key environment variables.

import pytest

from isbnresolver.config import ISBNDB_API_KEY_ENV


@pytest.fixture(autouse=True)
def _no_isbndb_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure a developer's ISBNdb key never leaks into tests."""
    monkeypatch.delenv(ISBNDB_API_KEY_ENV, raising=False)
