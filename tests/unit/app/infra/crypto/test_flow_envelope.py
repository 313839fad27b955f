"""Testes para descriptografia de envelopes JWE de WhatsApp Flow."""

from __future__ import annotations

import pytest

from app.infra.crypto import FlowCryptoError, check_compact_shape, decrypt_envelope, to_jwk
from app.infra.crypto.keys import load_private_key
from tests.fakes.flow_envelopes import (
    default_key_pair,
    encrypt_payload,
    encrypt_plaintext,
    generate_key_pair,
    tamper,
)


def _private_jwk():
    return to_jwk(load_private_key(default_key_pair().private_pem))


def test_decrypt_envelope_returns_payload() -> None:
    payload = {"action": "data_exchange", "screen": "SUMMARY", "data": {"name": "Ana"}}
    envelope = encrypt_payload(payload, default_key_pair().public_jwk)

    assert decrypt_envelope(envelope, _private_jwk()) == payload


@pytest.mark.parametrize(
    ("alg", "enc"),
    [
        ("RSA-OAEP", "A128GCM"),
        ("RSA-OAEP-256", "A256GCM"),
        ("RSA-OAEP-256", "A128CBC-HS256"),
    ],
)
def test_decrypt_envelope_supports_rsa_oaep_variants(alg: str, enc: str) -> None:
    envelope = encrypt_payload({"ok": True}, default_key_pair().public_jwk, alg=alg, enc=enc)

    assert decrypt_envelope(envelope, _private_jwk()) == {"ok": True}


def test_decrypt_envelope_rejects_tampered_ciphertext() -> None:
    envelope = encrypt_payload({"ok": True}, default_key_pair().public_jwk)

    with pytest.raises(FlowCryptoError, match="Envelope decryption failed"):
        decrypt_envelope(tamper(envelope), _private_jwk())


def test_decrypt_envelope_rejects_wrong_key() -> None:
    other = generate_key_pair()
    envelope = encrypt_payload({"ok": True}, other.public_jwk)

    with pytest.raises(FlowCryptoError, match="Envelope decryption failed"):
        decrypt_envelope(envelope, _private_jwk())


def test_decrypt_envelope_rejects_non_json_plaintext() -> None:
    envelope = encrypt_plaintext(b"not-json", default_key_pair().public_jwk)

    with pytest.raises(FlowCryptoError, match="not valid UTF-8 JSON"):
        decrypt_envelope(envelope, _private_jwk())


def test_decrypt_envelope_rejects_non_object_json() -> None:
    envelope = encrypt_payload([1, 2, 3], default_key_pair().public_jwk)

    with pytest.raises(FlowCryptoError, match="must be a JSON object"):
        decrypt_envelope(envelope, _private_jwk())


@pytest.mark.parametrize(
    "envelope",
    ["", "abc", "a.b", "a.b.c.d", "a.b.c.d.e.f", "%%%.b.c.d.e", ".b.c.d.e"],
)
def test_check_compact_shape_rejects_malformed(envelope: str) -> None:
    with pytest.raises(FlowCryptoError, match="Malformed envelope"):
        check_compact_shape(envelope)


def test_check_compact_shape_accepts_three_and_five_segments() -> None:
    check_compact_shape("eyJhbGciOiJub25lIn0.e30.sig")
    check_compact_shape("eyJhbGciOiJSU0EtT0FFUCJ9.a.b.c.d")


def test_decrypt_envelope_rejects_three_segment_token() -> None:
    with pytest.raises(FlowCryptoError, match="Envelope decryption failed"):
        decrypt_envelope("eyJhbGciOiJub25lIn0.e30.c2ln", _private_jwk())
