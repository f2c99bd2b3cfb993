"""Identifier codec: bijective digits-only encoding of integer keys (Sqids).

Sqids pads short encodings to min_length with a scheme derived from the
encoded length, so padding never makes two inputs collide. A string is
accepted on decode only when it is the canonical encoding of what it decodes
to; Sqids alone would also decode many non-canonical digit strings.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import lru_cache

from sqids import Sqids

from prefixed_ids.core.config import get_settings
from prefixed_ids.core.constants import DEFAULT_MIN_LENGTH, DIGIT_ALPHABET
from prefixed_ids.domain.exceptions import ValidationException
from prefixed_ids.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Largest key Sqids can encode (signed 64-bit on 64-bit builds).
MAX_KEY = sys.maxsize


class IdentifierCodec:
    """Encode/decode integer sequences with a fixed alphabet and minimum length.

    Instances are immutable after construction and safe to share across
    threads. Use get_codec() for the process-wide instance.
    """

    def __init__(
        self,
        alphabet: str = DIGIT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self._alphabet = alphabet
        self._min_length = min_length
        self._sqids = Sqids(alphabet=alphabet, min_length=min_length)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    def encode(self, ids: Sequence[int]) -> str:
        """Encode a non-empty sequence of non-negative integers.

        Raises:
            ValidationException: If ids is empty or holds a value that is not
                an int in 0..MAX_KEY.
        """
        if not ids:
            raise ValidationException("At least one id is required", field="ids")
        for value in ids:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationException(
                    f"Ids must be integers, got {type(value).__name__}", field="ids"
                )
            if value < 0 or value > MAX_KEY:
                raise ValidationException(
                    f"Ids must be between 0 and {MAX_KEY}, got {value}", field="ids"
                )
        return self._sqids.encode(list(ids))

    def decode(self, value: str) -> list[int] | None:
        """Decode an encoded string back to its integer sequence.

        Returns None (never raises) for empty input, characters outside the
        alphabet, and strings that are not a canonical encoding.
        """
        if not value:
            return None
        ids = self._sqids.decode(value)
        if not ids:
            return None
        try:
            canonical = self._sqids.encode(ids)
        except ValueError:
            # Decoded value exceeds MAX_KEY; no encoding produces it.
            logger.debug("Rejected identifier body (out of range): %r", value)
            return None
        if canonical != value:
            logger.debug("Rejected non-canonical identifier body: %r", value)
            return None
        return ids

    def encode_key(self, key: int) -> str:
        """Encode a single integer key."""
        return self.encode([key])

    def decode_key(self, value: str) -> int | None:
        """Decode a body to its integer key (first element), or None."""
        ids = self.decode(value)
        return ids[0] if ids else None


@lru_cache
def get_codec() -> IdentifierCodec:
    """Return the process-wide codec built from settings.

    In tests, call get_codec.cache_clear() together with
    get_settings.cache_clear() after changing codec settings.
    """
    settings = get_settings()
    return IdentifierCodec(
        alphabet=settings.id_alphabet,
        min_length=settings.id_min_length,
    )
