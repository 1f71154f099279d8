from splitshare.config import Settings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SPLIT_TOLERANCE", "0.01")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("BOT_TOKEN", raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.split_tolerance == 0.01
    assert settings.log_level == "debug"
    assert settings.bot_token is None


def test_settings_defaults(monkeypatch):
    for name in ("SPLIT_TOLERANCE", "LOG_LEVEL", "BOT_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.split_tolerance == 1e-4
    assert settings.log_level == "INFO"
