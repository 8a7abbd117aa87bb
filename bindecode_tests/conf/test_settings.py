from pathlib import Path

import pytest
from pydantic import ValidationError

from bindecode.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, DecoderSettings, get_settings
from bindecode.serialization import ByteOrder, SizeLimit
from bindecode.utils.yaml import dict_from_extended_yaml, dict_from_yaml

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_default_settings() -> None:
    settings = DecoderSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == DecoderSettings()
    assert settings.BYTE_ORDER is ByteOrder.LITTLE
    assert settings.default_size_limit() == SizeLimit.infinite()


def test_unittests_settings() -> None:
    settings = DecoderSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings.BYTE_ORDER is ByteOrder.LITTLE
    assert settings.default_size_limit() == SizeLimit.bounded(1048576)


def test_valid_settings_from_yaml() -> None:
    settings = DecoderSettings.from_yaml(filepath=FIXTURES_DIR / 'valid_settings_fixture.yml')
    assert settings == DecoderSettings(BYTE_ORDER=ByteOrder.BIG, SIZE_LIMIT=4096, STREAM_CHUNK_SIZE=512)


def test_extended_settings_from_yaml() -> None:
    settings = DecoderSettings.from_yaml(filepath=FIXTURES_DIR / 'extended_settings_fixture.yml')
    assert settings.BYTE_ORDER is ByteOrder.BIG
    assert settings.SIZE_LIMIT == 128


@pytest.mark.parametrize(
    ['filepath', 'error'],
    [
        ('invalid_byte_order_settings_fixture.yml', "Input should be 'big' or 'little'"),
        ('negative_size_limit_settings_fixture.yml', 'Value error, SIZE_LIMIT cannot be negative, got -1'),
        ('zero_chunk_size_settings_fixture.yml', 'Value error, STREAM_CHUNK_SIZE must be positive, got 0'),
        ('unknown_key_settings_fixture.yml', 'Extra inputs are not permitted'),
    ]
)
def test_invalid_settings_from_yaml(filepath: str, error: str) -> None:
    with pytest.raises(ValidationError) as e:
        DecoderSettings.from_yaml(filepath=FIXTURES_DIR / filepath)

    errors = e.value.errors()
    assert errors[0]['msg'] == error


def test_settings_are_frozen() -> None:
    settings = DecoderSettings()
    with pytest.raises(ValidationError):
        settings.SIZE_LIMIT = 10  # type: ignore[misc]


def test_yaml_extends_cycle() -> None:
    with pytest.raises(ValueError, match='is extended in a cycle'):
        dict_from_extended_yaml(filepath=FIXTURES_DIR / 'cycle_a_fixture.yml')


def test_yaml_not_a_dict() -> None:
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        dict_from_yaml(filepath=FIXTURES_DIR / 'list_fixture.yml')


def test_yaml_missing_file() -> None:
    with pytest.raises(ValueError, match='is not a file'):
        dict_from_yaml(filepath=FIXTURES_DIR / 'missing_fixture.yml')


def test_global_settings_singleton(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    valid_filepath = str(FIXTURES_DIR / 'valid_settings_fixture.yml')
    monkeypatch.setenv(get_settings.CONFIG_YAML_ENV_VAR, valid_filepath)

    settings = get_settings.get_global_settings()
    assert settings.BYTE_ORDER is ByteOrder.BIG
    assert get_settings.get_global_settings() is settings
    assert get_settings.get_settings_source() == valid_filepath

    monkeypatch.setenv(get_settings.CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_settings.get_global_settings()


def test_global_settings_default_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.delenv(get_settings.CONFIG_YAML_ENV_VAR, raising=False)

    assert get_settings.get_global_settings() == DecoderSettings()
    assert get_settings.get_settings_source() == DEFAULT_SETTINGS_FILEPATH


def test_settings_source_before_loading(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    with pytest.raises(AssertionError):
        get_settings.get_settings_source()
