"""Criptografia de envelopes de WhatsApp Flows.

Implementações concretas usadas pelo serviço de descriptografia:
- keys: carregamento da chave privada PEM
- flow_envelope: descriptografia de JWE compacto
"""

from .errors import FlowCryptoError
from .flow_envelope import check_compact_shape, decrypt_envelope
from .keys import load_private_key, to_jwk

__all__ = [
    "FlowCryptoError",
    "check_compact_shape",
    "decrypt_envelope",
    "load_private_key",
    "to_jwk",
]
