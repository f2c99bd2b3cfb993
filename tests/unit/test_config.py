"""Tests for Settings validation and caching."""

import pytest

from prefixed_ids.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.id_alphabet == "0123456789"
    assert settings.id_min_length == 12
    assert settings.entity_prefixes == {}
    assert settings.database_url == ""


def test_reordered_digits_allowed() -> None:
    assert Settings(_env_file=None, id_alphabet="9876543210").id_alphabet == "9876543210"


@pytest.mark.parametrize("alphabet", ["012345678", "0123456789a", "0123456788", "abcdefghij"])
def test_alphabet_must_be_the_ten_digits(alphabet: str) -> None:
    with pytest.raises(ValueError, match="id_alphabet"):
        Settings(_env_file=None, id_alphabet=alphabet)


@pytest.mark.parametrize("min_length", [-1, 256])
def test_min_length_bounds(min_length: int) -> None:
    with pytest.raises(ValueError, match="id_min_length"):
        Settings(_env_file=None, id_min_length=min_length)


def test_frozen() -> None:
    settings = Settings(_env_file=None)
    with pytest.raises(ValueError):
        settings.id_min_length = 4  # type: ignore[misc]


def test_entity_prefixes_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTITY_PREFIXES", '{"Product": "prod", "Variant": "variant"}')
    assert get_settings().entity_prefixes == {"Product": "prod", "Variant": "variant"}


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
