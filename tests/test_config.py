import pytest

from core.config import DEFAULT_BASE_URL, ConfigLoader, Settings, get_config, load_settings
from core.errors import ConfigError
from core.tiers import AccessTier


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        monkeypatch.setenv("CMC_MCP_CONFIG", str(path))
        ConfigLoader.reload()
        return path
    return _write


def test_defaults_without_file_or_env():
    settings = load_settings()

    assert settings == Settings()
    assert settings.api_key is None
    assert settings.subscription_level is AccessTier.BASIC
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.port == 3000
    assert settings.transport == "both"


def test_missing_file_is_empty_config():
    assert get_config() == {}


def test_yaml_values(config_file):
    config_file("subscription_level: Startup\nport: 8123\nbase_url: https://sandbox-api.coinmarketcap.com/\n")
    settings = load_settings()

    assert settings.subscription_level is AccessTier.STARTUP
    assert settings.port == 8123
    assert settings.base_url == "https://sandbox-api.coinmarketcap.com"


def test_environment_beats_yaml(config_file, monkeypatch):
    config_file("subscription_level: Startup\n")
    monkeypatch.setenv("SUBSCRIPTION_LEVEL", "Standard")
    monkeypatch.setenv("COINMARKETCAP_API_KEY", "env-key")

    settings = load_settings()

    assert settings.subscription_level is AccessTier.STANDARD
    assert settings.api_key == "env-key"


def test_overrides_beat_environment(monkeypatch):
    monkeypatch.setenv("COINMARKETCAP_API_KEY", "env-key")
    monkeypatch.setenv("SUBSCRIPTION_LEVEL", "Standard")

    settings = load_settings({"COINMARKETCAP_API_KEY": "caller-key", "SUBSCRIPTION_LEVEL": "Enterprise"})

    assert settings.api_key == "caller-key"
    assert settings.subscription_level is AccessTier.ENTERPRISE


def test_empty_override_does_not_clear_environment(monkeypatch):
    monkeypatch.setenv("COINMARKETCAP_API_KEY", "env-key")

    assert load_settings({"COINMARKETCAP_API_KEY": ""}).api_key == "env-key"


def test_unknown_tier_falls_back_to_basic(monkeypatch):
    monkeypatch.setenv("SUBSCRIPTION_LEVEL", "Diamond")

    assert load_settings().subscription_level is AccessTier.BASIC


@pytest.mark.parametrize("env_name,value", [
    ("PORT", "eighty"),
    ("REQUEST_TIMEOUT", "soon"),
    ("MCP_TRANSPORT", "carrier-pigeon"),
])
def test_invalid_values_raise(monkeypatch, env_name, value):
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ConfigError):
        load_settings()


def test_non_mapping_yaml_rejected(config_file):
    config_file("- just\n- a list\n")

    with pytest.raises(ConfigError):
        get_config()


def test_repr_hides_api_key():
    settings = Settings(api_key="super-secret")

    assert "super-secret" not in repr(settings)
    assert settings.has_api_key
