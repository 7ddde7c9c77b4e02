from pathlib import Path

import pytest
from pydantic import ValidationError

from numcodec.conf import DEBUG_SETTINGS_FILEPATH, DEFAULT_SETTINGS_FILEPATH, LEGACY_SETTINGS_FILEPATH
from numcodec.conf.get_settings import CONFIG_YAML_ENV_VAR, get_settings, get_settings_source
from numcodec.conf.settings import CodecSettings


def _get_absolute_filepath(filepath: str) -> str:
    parent_dir = Path(__file__).parent
    return str(parent_dir / filepath)


def test_default_settings():
    settings = CodecSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == CodecSettings()
    assert settings.STRICT_VARINTS is True
    assert settings.FLOAT_FORMAT == 'repr'
    assert settings.HEX_SEPARATOR == ''


def test_debug_settings():
    settings = CodecSettings.from_yaml(filepath=DEBUG_SETTINGS_FILEPATH)
    assert settings == CodecSettings(FLOAT_FORMAT='hex', HEX_SEPARATOR=' ')


def test_legacy_settings():
    settings = CodecSettings.from_yaml(filepath=LEGACY_SETTINGS_FILEPATH)
    assert settings == CodecSettings(STRICT_VARINTS=False)


def test_settings_extending_bundled_file():
    settings = CodecSettings.from_yaml(filepath=_get_absolute_filepath('fixtures/default_extends.yml'))
    assert settings == CodecSettings(HEX_SEPARATOR=':')


@pytest.mark.parametrize(
    ['filepath', 'error'],
    [
        ('fixtures/unknown_setting.yml', 'Extra inputs are not permitted'),
        ('fixtures/invalid_float_format.yml', "Input should be 'repr' or 'hex'"),
    ]
)
def test_invalid_settings(filepath, error):
    with pytest.raises(ValidationError) as e:
        CodecSettings.from_yaml(filepath=_get_absolute_filepath(filepath))

    assert error in str(e.value)


def test_settings_are_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.STRICT_VARINTS = False  # type: ignore[misc]


def test_get_settings_from_env(reset_settings, monkeypatch):
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, LEGACY_SETTINGS_FILEPATH)
    settings = get_settings()
    assert settings.STRICT_VARINTS is False
    assert get_settings_source() == LEGACY_SETTINGS_FILEPATH
    # loaded once, the same instance is handed out afterwards
    assert get_settings() is settings


def test_get_settings_default(reset_settings, monkeypatch):
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    assert get_settings() == CodecSettings()
    assert get_settings_source() == DEFAULT_SETTINGS_FILEPATH


def test_get_settings_twice_with_different_file(reset_settings, monkeypatch):
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    get_settings()
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, DEBUG_SETTINGS_FILEPATH)
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_settings()


def test_get_settings_source_before_loading(reset_settings):
    with pytest.raises(AssertionError):
        get_settings_source()
