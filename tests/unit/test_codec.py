"""Tests for IdentifierCodec (round-trip, length, alphabet, robustness)."""

import random

import pytest

from prefixed_ids.application.services.codec import MAX_KEY, IdentifierCodec, get_codec
from prefixed_ids.domain.exceptions import ValidationException

KEYS = [0, 1, 9, 10, 42, 99, 12345, 999_999, 2**31 - 1, 2**32, 2**53 + 1, MAX_KEY]


class TestRoundTrip:
    """decode(encode(k)) == [k] over the supported range."""

    @pytest.mark.parametrize("key", KEYS)
    def test_single_key(self, codec: IdentifierCodec, key: int) -> None:
        assert codec.decode(codec.encode([key])) == [key]

    def test_random_sample(self, codec: IdentifierCodec) -> None:
        rng = random.Random(1234)
        for _ in range(500):
            key = rng.randint(0, MAX_KEY)
            assert codec.decode_key(codec.encode_key(key)) == key

    def test_sequence(self, codec: IdentifierCodec) -> None:
        assert codec.decode(codec.encode([1, 2, 3])) == [1, 2, 3]

    def test_deterministic(self, codec: IdentifierCodec) -> None:
        assert codec.encode_key(12345) == codec.encode_key(12345)
        assert IdentifierCodec().encode_key(12345) == codec.encode_key(12345)


class TestShape:
    """Encoded bodies are digits only and at least min_length long."""

    @pytest.mark.parametrize("key", KEYS)
    def test_min_length_and_digits(self, codec: IdentifierCodec, key: int) -> None:
        body = codec.encode_key(key)
        assert len(body) >= 12
        assert all(c in "0123456789" for c in body)

    def test_custom_min_length(self) -> None:
        codec = IdentifierCodec(min_length=20)
        body = codec.encode_key(5)
        assert len(body) >= 20
        assert codec.decode_key(body) == 5

    def test_custom_digit_order_round_trips(self) -> None:
        codec = IdentifierCodec(alphabet="9876543210")
        assert codec.decode_key(codec.encode_key(12345)) == 12345


class TestInjectivity:
    """Distinct keys never share an encoding (sample-based)."""

    def test_first_ten_thousand_keys(self, codec: IdentifierCodec) -> None:
        bodies = {codec.encode_key(k) for k in range(10_000)}
        assert len(bodies) == 10_000

    def test_sparse_large_keys(self, codec: IdentifierCodec) -> None:
        rng = random.Random(99)
        keys = {rng.randint(0, MAX_KEY) for _ in range(2_000)}
        bodies = {codec.encode_key(k) for k in keys}
        assert len(bodies) == len(keys)


class TestDecodeRobustness:
    """Invalid input decodes to None instead of raising."""

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-valid-chars-!!",
            "abcdefghijkl",
            "12345678901a",
            "１２３４５６７８９０１２",
            " ",
        ],
    )
    def test_invalid_returns_none(self, codec: IdentifierCodec, value: str) -> None:
        assert codec.decode(value) is None
        assert codec.decode_key(value) is None

    def test_short_digit_string_is_not_canonical(self, codec: IdentifierCodec) -> None:
        # Every canonical body is at least 12 characters long.
        assert codec.decode("42") is None

    def test_tampered_body_is_rejected(self, codec: IdentifierCodec) -> None:
        body = codec.encode_key(12345)
        assert codec.decode(body + "0") is None
        assert codec.decode(body[1:]) is None

    def test_oversized_value_is_rejected(self, codec: IdentifierCodec) -> None:
        assert codec.decode("9" * 60) is None


class TestEncodeValidation:
    """Encoding rejects values outside 0..MAX_KEY."""

    @pytest.mark.parametrize("ids", [[], [-1], [MAX_KEY + 1], [True], [1.5], ["7"]])
    def test_invalid_ids_raise(self, codec: IdentifierCodec, ids: list) -> None:
        with pytest.raises(ValidationException) as exc_info:
            codec.encode(ids)
        assert exc_info.value.details == {"field": "ids"}


class TestGetCodec:
    """get_codec() is built from settings and cached per process."""

    def test_defaults(self) -> None:
        codec = get_codec()
        assert codec.alphabet == "0123456789"
        assert codec.min_length == 12
        assert get_codec() is codec

    def test_reads_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ID_MIN_LENGTH", "16")
        codec = get_codec()
        assert codec.min_length == 16
        assert len(codec.encode_key(1)) >= 16
