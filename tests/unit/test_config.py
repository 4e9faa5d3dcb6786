from json_response.core.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("JSON_RESPONSE_PORT", "JSON_RESPONSE_HOST", "JSON_RESPONSE_ENV"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.host == "127.0.0.1"
    assert settings.port == 3001
    assert settings.env == "prod"
    assert settings.debug is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JSON_RESPONSE_PORT", "8080")
    monkeypatch.setenv("JSON_RESPONSE_ENV", "dev")
    monkeypatch.setenv("JSON_RESPONSE_DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.env == "dev"
    assert settings.debug is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
