import pytest
from underbar.core.config import Settings
from underbar.core.errors import ConfigurationError


def test_defaults_when_environment_is_empty():
    settings = Settings.load({})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.SHUFFLE_SEED is None
    assert settings.TIMER_DAEMON is True


def test_values_read_from_prefixed_variables():
    settings = Settings.load(
        {
            "UNDERBAR_LOG_LEVEL": "debug",
            "UNDERBAR_SHUFFLE_SEED": "42",
            "UNDERBAR_TIMER_DAEMON": "false",
        }
    )
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SHUFFLE_SEED == 42
    assert settings.TIMER_DAEMON is False


def test_unprefixed_and_empty_variables_are_ignored():
    settings = Settings.load({"LOG_LEVEL": "ERROR", "UNDERBAR_SHUFFLE_SEED": ""})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.SHUFFLE_SEED is None


@pytest.mark.parametrize(
    "environ",
    [
        {"UNDERBAR_LOG_LEVEL": "verbose"},
        {"UNDERBAR_SHUFFLE_SEED": "not-a-number"},
    ],
)
def test_invalid_values_raise_configuration_error(environ):
    with pytest.raises(ConfigurationError):
        Settings.load(environ)
