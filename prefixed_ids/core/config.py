"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Settings are frozen: the codec configuration must not
change for the lifetime of any data that references issued identifiers.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prefixed_ids.core.constants import (
    DEFAULT_MIN_LENGTH,
    DIGIT_ALPHABET,
    MAX_MIN_LENGTH,
)


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    id_alphabet and id_min_length must match across every process that
    encodes or decodes identifiers for the same stored data.
    """

    # App
    app_name: str = "prefixed-ids"
    app_version: str = "1.0.0"
    debug: bool = False

    # Codec
    id_alphabet: str = DIGIT_ALPHABET
    id_min_length: int = DEFAULT_MIN_LENGTH

    # Entity type -> prefix, registered at application start-up.
    # ENTITY_PREFIXES='{"Product": "prod", "Variant": "variant"}'
    entity_prefixes: dict[str, str] = {}

    # Database (empty = SQL not configured)
    database_url: str = ""
    database_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("id_alphabet")
    @classmethod
    def validate_id_alphabet(cls, value: str) -> str:
        """Alphabet must be an ordering of exactly the ten decimal digits."""
        if len(value) != len(DIGIT_ALPHABET) or set(value) != set(DIGIT_ALPHABET):
            raise ValueError(
                f"id_alphabet must contain each of the digits {DIGIT_ALPHABET!r} "
                f"exactly once, got: {value!r}"
            )
        return value

    @field_validator("id_min_length")
    @classmethod
    def validate_id_min_length(cls, value: int) -> int:
        if value < 0 or value > MAX_MIN_LENGTH:
            raise ValueError(
                f"id_min_length must be between 0 and {MAX_MIN_LENGTH}, got: {value}"
            )
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
