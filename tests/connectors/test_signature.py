"""Testes para riskified_sdk.connectors.signature."""

from __future__ import annotations

import pytest

from riskified_sdk.connectors.signature import SignatureHandler, sign, verify

KNOWN_KEY = "key"
KNOWN_MESSAGE = b"The quick brown fox jumps over the lazy dog"
KNOWN_DIGEST = "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"


class TestSign:
    """Testes para sign()."""

    def test_known_vector(self) -> None:
        assert sign(KNOWN_KEY, KNOWN_MESSAGE) == KNOWN_DIGEST

    def test_str_and_bytes_are_equivalent(self) -> None:
        assert sign(KNOWN_KEY, KNOWN_MESSAGE.decode("utf-8")) == KNOWN_DIGEST

    def test_deterministic(self) -> None:
        body = b'{"order":{"id":"1"}}'
        assert sign("secret", body) == sign("secret", body)

    def test_different_key_changes_digest(self) -> None:
        assert sign("other", KNOWN_MESSAGE) != KNOWN_DIGEST

    def test_empty_payload(self) -> None:
        digest = sign("secret", b"")
        assert len(digest) == 64
        assert digest == digest.lower()


class TestVerify:
    """Testes para verify()."""

    def test_accepts_own_signature(self) -> None:
        body = b'{"order":{"id":"1","status":"approved"}}'
        assert verify("secret", body, sign("secret", body)) is True

    def test_accepts_uppercase_hex(self) -> None:
        assert verify(KNOWN_KEY, KNOWN_MESSAGE, KNOWN_DIGEST.upper()) is True

    def test_rejects_single_bit_flip_in_payload(self) -> None:
        body = bytearray(b'{"order":{"id":"1","status":"approved"}}')
        signature = sign("secret", bytes(body))
        body[10] ^= 0x01

        assert verify("secret", bytes(body), signature) is False

    def test_rejects_wrong_key(self) -> None:
        assert verify("wrong", KNOWN_MESSAGE, KNOWN_DIGEST) is False

    @pytest.mark.parametrize("signature", ["café", "\u00e9" * 64, "ＡＢＣ"])
    def test_non_ascii_signature_is_rejected(self, signature: str) -> None:
        assert verify(KNOWN_KEY, KNOWN_MESSAGE, signature) is False

    @pytest.mark.parametrize("signature", ["", None])
    def test_rejects_missing_signature(self, signature: str | None) -> None:
        assert verify(KNOWN_KEY, KNOWN_MESSAGE, signature) is False


class TestSignatureHandler:
    """Testes para SignatureHandler."""

    def test_binds_secret(self) -> None:
        handler = SignatureHandler(KNOWN_KEY)

        assert handler.sign(KNOWN_MESSAGE) == KNOWN_DIGEST
        assert handler.verify(KNOWN_MESSAGE, KNOWN_DIGEST) is True

    def test_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="auth_key"):
            SignatureHandler("")
