import pytest

from dicephrase.config import Settings, get_settings, validate_settings
from dicephrase.schemas import EmbeddedList


def make_settings(**overrides) -> Settings:
    values = {
        "DEFAULT_LIST": "EN",
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


def test_validate_settings_accepts_valid_values():
    settings = make_settings()
    validate_settings(settings)


@pytest.mark.parametrize("level", ["debug", "INFO", "Error"])
def test_validate_settings_accepts_level_in_any_case(level: str):
    validate_settings(make_settings(LOG_LEVEL=level))


def test_validate_settings_rejects_unknown_log_level():
    settings = make_settings(LOG_LEVEL="LOUD")

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    assert "LOG_LEVEL" in str(exc.value)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DICEPHRASE_DEFAULT_LIST", "FR")
    monkeypatch.setenv("DICEPHRASE_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.DEFAULT_LIST is EmbeddedList.FR
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_defaults():
    settings = get_settings()

    assert settings.DEFAULT_LIST is EmbeddedList.EN
    assert settings.LOG_LEVEL == "WARNING"


def test_settings_reject_unknown_default_list():
    with pytest.raises(ValueError):
        make_settings(DEFAULT_LIST="DE")
