"""Unit test fixtures with mocked dependencies."""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_probe():
    """Provide a mocked identifier probe."""
    return MagicMock()


@pytest.fixture
def hash_client(mock_probe):
    """Provide a hash id client that does not persist analysis ids."""
    from identifiers.infrastructure.hash_id_client import HashIdClient

    return HashIdClient(probe=mock_probe)


@pytest.fixture
def persistent_hash_client(mock_probe):
    """Provide a hash id client that remembers analysis ids."""
    from identifiers.infrastructure.hash_id_client import HashIdClient

    return HashIdClient(persist_in_memory=True, probe=mock_probe)


@pytest.fixture
def sequence_source():
    """Build a candidate source that replays the given values in order."""

    def _make(*values: str):
        iterator: Iterator[str] = iter(values)
        return MagicMock(side_effect=lambda: next(iterator))

    return _make


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from IDCLIENT_* environment and cached settings."""
    from infrastructure.settings import get_id_client_settings

    for name in (
        "IDCLIENT_CLIENT",
        "IDCLIENT_PERSIST_IN_MEMORY",
        "IDCLIENT_SERVICE_URI",
        "IDCLIENT_RELEASE",
        "IDCLIENT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_id_client_settings.cache_clear()
    yield
    get_id_client_settings.cache_clear()
