import pytest
from pydantic import ValidationError

from core.config import Settings, load_settings

ENV_VARS = ("A2A_LOG_LEVEL", "A2A_LOG_FILE", "A2A_STRICT_VALIDATION")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without inherited A2A_* variables and away from any real .env file."""
    for name in ENV_VARS:
        # set then delete so monkeypatch also undoes anything load_dotenv writes
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults(tmp_path):
    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert settings == Settings(log_level="INFO", log_file=None, strict_validation=True)


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("A2A_LOG_LEVEL", "debug")
    monkeypatch.setenv("A2A_LOG_FILE", str(tmp_path / "a2a.log"))
    monkeypatch.setenv("A2A_STRICT_VALIDATION", "false")

    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.log_level == "DEBUG"
    assert settings.log_file == str(tmp_path / "a2a.log")
    assert settings.strict_validation is False


def test_reads_dotenv_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A2A_LOG_LEVEL=WARNING\nA2A_STRICT_VALIDATION=0\n", encoding="utf-8")

    settings = load_settings(dotenv_path=str(env_file))
    assert settings.log_level == "WARNING"
    assert settings.strict_validation is False


def test_environment_wins_over_dotenv(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A2A_LOG_LEVEL=ERROR\n", encoding="utf-8")
    monkeypatch.setenv("A2A_LOG_LEVEL", "INFO")

    assert load_settings(dotenv_path=str(env_file)).log_level == "INFO"


def test_rejects_bad_boolean(monkeypatch, tmp_path):
    monkeypatch.setenv("A2A_STRICT_VALIDATION", "maybe")
    with pytest.raises(ValueError, match="A2A_STRICT_VALIDATION must be a boolean"):
        load_settings(dotenv_path=str(tmp_path / "missing.env"))


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings(log_level="chatty")
