"""
Tests for Client Configuration
"""

from strangerchat import ClientSettings


def test_defaults():
    """Test the default settings."""
    settings = ClientSettings()
    assert settings.status_url == "https://omegle.com/status"
    assert settings.relay_domain == "omegle.com"
    assert settings.lang == "en"
    assert settings.timeout == 30.0


def test_relay_url():
    """Test that relay URLs combine relay name, domain, and path."""
    settings = ClientSettings()
    assert settings.relay_url("front3", "events") == "https://front3.omegle.com/events"


def test_from_env_overrides(monkeypatch):
    """Test that environment variables override the defaults."""
    monkeypatch.setenv("STRANGERCHAT_STATUS_URL", "https://relay.test/status")
    monkeypatch.setenv("STRANGERCHAT_RELAY_DOMAIN", "relay.test")
    monkeypatch.setenv("STRANGERCHAT_LANG", "de")
    monkeypatch.setenv("STRANGERCHAT_CAPS", "t")
    monkeypatch.setenv("STRANGERCHAT_TIMEOUT", "5")

    settings = ClientSettings.from_env()
    assert settings.status_url == "https://relay.test/status"
    assert settings.relay_domain == "relay.test"
    assert settings.lang == "de"
    assert settings.caps == "t"
    assert settings.timeout == 5.0


def test_from_env_defaults(monkeypatch):
    """Test that from_env falls back to defaults."""
    for name in (
        "STRANGERCHAT_STATUS_URL",
        "STRANGERCHAT_RELAY_DOMAIN",
        "STRANGERCHAT_LANG",
        "STRANGERCHAT_CAPS",
        "STRANGERCHAT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    assert ClientSettings.from_env() == ClientSettings()
