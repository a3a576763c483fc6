"""Unit tests for id client settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import IdClientSettings, get_id_client_settings


class TestIdClientSettings:
    def test_defaults(self):
        settings = IdClientSettings()
        assert settings.client == "hash"
        assert settings.persist_in_memory is False
        assert settings.service_uri is None
        assert settings.release is None
        assert settings.log_level == "info"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("IDCLIENT_PERSIST_IN_MEMORY", "1")
        monkeypatch.setenv("IDCLIENT_RELEASE", "ICGC27")
        monkeypatch.setenv("IDCLIENT_SERVICE_URI", "https://id.example.org")

        settings = IdClientSettings()

        assert settings.persist_in_memory is True
        assert settings.release == "ICGC27"
        assert settings.service_uri == "https://id.example.org"

    def test_client_name_is_normalized(self):
        assert IdClientSettings(client="  HASH ").client == "hash"

    def test_blank_client_is_rejected(self):
        with pytest.raises(ValidationError):
            IdClientSettings(client="   ")

    def test_invalid_boolean_is_rejected(self):
        with pytest.raises(ValidationError):
            IdClientSettings(persist_in_memory="sometimes")


class TestGetIdClientSettings:
    def test_is_cached(self):
        assert get_id_client_settings() is get_id_client_settings()
