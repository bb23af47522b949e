from __future__ import annotations

import pytest

from paddelup.core.config import GristConfig, Settings
from paddelup.infrastructure.grist.grist_client import GristRecordStore
from paddelup.infrastructure.grist.mock_record_store import MockRecordStore
from paddelup.wiring import dependencies


def test_grist_config_from_settings():
    """Grist config builds the records URL and keeps the credential out of repr."""
    source = Settings(GRIST_DOC_ID="doc", GRIST_TABLE_ID="Table1", GRIST_API_KEY="s3cr3t", _env_file=None)
    config = GristConfig.from_settings(source)

    assert config.records_url == "https://docs.getgrist.com/api/docs/doc/tables/Table1/records"
    assert config.api_key.get_secret_value() == "s3cr3t"
    assert "s3cr3t" not in repr(config)


def test_grist_config_lists_missing_values():
    """Every missing Grist setting is named in the error."""
    with pytest.raises(ValueError) as exc:
        GristConfig.from_settings(Settings(GRIST_API_KEY="key", _env_file=None))
    assert "GRIST_DOC_ID" in str(exc.value)
    assert "GRIST_TABLE_ID" in str(exc.value)
    assert "GRIST_API_KEY" not in str(exc.value)


def _wired_store(monkeypatch, **overrides):
    monkeypatch.setattr(dependencies, "settings", Settings(_env_file=None, **overrides))
    dependencies.get_record_store.cache_clear()
    try:
        return dependencies.get_record_store()
    finally:
        dependencies.get_record_store.cache_clear()


def test_dev_without_credential_uses_mock_store(monkeypatch):
    """Dev without a credential wires the in-memory store."""
    assert isinstance(_wired_store(monkeypatch, ENV="dev"), MockRecordStore)


def test_prod_without_credential_fails(monkeypatch):
    """Non-dev environments refuse to start the proxy without a credential."""
    with pytest.raises(ValueError):
        _wired_store(monkeypatch, ENV="prod")


def test_credential_wires_grist_store(monkeypatch):
    """A full Grist configuration wires the real client."""
    store = _wired_store(
        monkeypatch,
        ENV="prod",
        GRIST_DOC_ID="doc",
        GRIST_TABLE_ID="Table1",
        GRIST_API_KEY="key",
    )
    assert isinstance(store, GristRecordStore)
