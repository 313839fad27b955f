"""Descriptografia de envelopes compactos (JWE) de WhatsApp Flows.

Formato compacto: header.encrypted_key.iv.ciphertext.tag, cada segmento
em base64url. Algoritmos aceitos seguem o padrão seguro do jwcrypto
(RSA-OAEP / RSA-OAEP-256 com AES-GCM ou AES-CBC-HMAC).
"""

from __future__ import annotations

import json
import re

from jwcrypto import jwe, jwk
from jwcrypto.common import JWException

from app.infra.crypto.errors import FlowCryptoError

COMPACT_SEGMENT_COUNTS = (3, 5)

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_\-]*")


def check_compact_shape(envelope: str) -> None:
    """Valida o formato compacto antes de qualquer operação com a chave.

    Raises:
        FlowCryptoError: Se o envelope não tiver 3 ou 5 segmentos base64url
    """
    segments = envelope.strip().split(".")
    if len(segments) not in COMPACT_SEGMENT_COUNTS:
        raise FlowCryptoError(
            f"Malformed envelope: expected 3 or 5 segments, got {len(segments)}"
        )
    if not all(_SEGMENT_RE.fullmatch(segment) for segment in segments):
        raise FlowCryptoError("Malformed envelope: invalid base64url characters")
    if not segments[0]:
        raise FlowCryptoError("Malformed envelope: empty protected header")


def decrypt_envelope(envelope: str, key: jwk.JWK) -> dict[str, object]:
    """Descriptografa o envelope e parseia o plaintext como objeto JSON.

    Args:
        envelope: Token JWE compacto
        key: Chave privada como JWK

    Returns:
        Payload descriptografado

    Raises:
        FlowCryptoError: Envelope malformado, chave errada, tag de
            autenticação inválida ou plaintext que não é objeto JSON
    """
    check_compact_shape(envelope)

    token = jwe.JWE()
    try:
        token.deserialize(envelope.strip(), key=key)
    except JWException as exc:
        raise FlowCryptoError(f"Envelope decryption failed: {exc}") from exc
    except Exception as exc:
        raise FlowCryptoError(f"Envelope decryption failed: {type(exc).__name__}") from exc

    try:
        payload = json.loads((token.plaintext or b"").decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FlowCryptoError("Decrypted payload is not valid UTF-8 JSON") from exc

    if not isinstance(payload, dict):
        raise FlowCryptoError("Decrypted payload must be a JSON object")

    return payload
