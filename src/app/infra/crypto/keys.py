"""Carregamento da chave privada RSA usada nos envelopes de Flow."""

from __future__ import annotations

from typing import Any

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from jwcrypto import jwk

from .errors import FlowCryptoError


def load_private_key(private_key_pem: str, passphrase: str | None = None) -> Any:
    """Carrega chave privada RSA em formato PEM.

    Args:
        private_key_pem: Chave privada em formato PEM
        passphrase: Senha da chave (opcional)

    Returns:
        Objeto de chave privada RSA (cryptography)

    Raises:
        FlowCryptoError: Se chave inválida ou não RSA
    """
    passphrase_bytes = passphrase.encode() if passphrase and passphrase.strip() else None

    def _load(password: bytes | None) -> Any:
        return serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"),
            password=password,
            backend=default_backend(),
        )

    try:
        key = _load(passphrase_bytes)
    except Exception as exc:
        # Passphrase injetada por configuração em chave sem criptografia
        exc_text = str(exc).lower()
        if passphrase_bytes and "private key is not encrypted" in exc_text:
            try:
                key = _load(None)
            except Exception as retry_exc:
                raise FlowCryptoError(f"Invalid private key: {retry_exc}") from retry_exc
        else:
            raise FlowCryptoError(f"Invalid private key: {exc}") from exc

    if not isinstance(key, rsa.RSAPrivateKey):
        raise FlowCryptoError("Invalid private key: expected RSA key")
    return key


def to_jwk(private_key: Any) -> jwk.JWK:
    """Converte chave `cryptography` para JWK (jwcrypto).

    Raises:
        FlowCryptoError: Se a conversão falhar
    """
    try:
        return jwk.JWK.from_pyca(private_key)
    except Exception as exc:
        raise FlowCryptoError(f"Invalid private key: {exc}") from exc
