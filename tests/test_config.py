import pytest

from workflow_data.config import Settings, ValidationError, clear_settings_cache, get_settings


def test_defaults():
    settings = Settings.from_env(env={})
    assert settings.logging.level == "INFO"
    assert settings.logging.json_logs is False
    assert settings.json_indent == 2
    assert settings.max_upload_bytes == 10 * 1024 * 1024


def test_reads_prefixed_env():
    env = {
        "WORKFLOW_DATA_LOG_LEVEL": "debug",
        "WORKFLOW_DATA_LOG_JSON": "1",
        "WORKFLOW_DATA_JSON_INDENT": "4",
        "WORKFLOW_DATA_MAX_UPLOAD_BYTES": "1024",
        "LOG_LEVEL": "ERROR",
    }
    settings = Settings.from_env(env=env)
    assert settings.logging.level == "DEBUG"
    assert settings.logging.json_logs is True
    assert settings.json_indent == 4
    assert settings.max_upload_bytes == 1024


def test_rejects_bad_values():
    with pytest.raises(ValidationError):
        Settings.from_env(env={"WORKFLOW_DATA_LOG_LEVEL": "LOUD"})
    with pytest.raises(ValidationError):
        Settings.from_env(env={"WORKFLOW_DATA_JSON_INDENT": "-1"})


def test_get_settings_caches(monkeypatch):
    clear_settings_cache()
    monkeypatch.setenv("WORKFLOW_DATA_JSON_INDENT", "3")
    assert get_settings().json_indent == 3
    monkeypatch.setenv("WORKFLOW_DATA_JSON_INDENT", "5")
    assert get_settings().json_indent == 3
    assert get_settings(reload=True).json_indent == 5
    clear_settings_cache()
