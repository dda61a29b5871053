"""
Settings loading unit tests.
"""
from unittest.mock import patch

import pytest

from source_fetcher.config import load_settings


@pytest.mark.unit
def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ETHERSCAN_API_KEY", "abc")
    monkeypatch.setenv("ETHERSCAN_NETWORK_ID", "5")
    monkeypatch.setenv("ETHERSCAN_REQUEST_TIMEOUT", "2.5")
    with patch("source_fetcher.config.load_dotenv"):
        settings = load_settings()
    assert settings.api_key == "abc"
    assert settings.network_id == 5
    assert settings.request_timeout == 2.5


@pytest.mark.unit
def test_load_settings_defaults(monkeypatch):
    for name in ("ETHERSCAN_API_KEY", "ETHERSCAN_NETWORK_ID", "ETHERSCAN_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    with patch("source_fetcher.config.load_dotenv"):
        settings = load_settings()
    assert settings.api_key is None
    assert settings.network_id == 1
    assert settings.request_timeout == 10
