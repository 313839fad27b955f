"""Serviço de descriptografia de envelopes de Flow (fail-open).

Qualquer falha vira "sem resultado" + log para o operador: o pipeline
segue encaminhando o corpo original e a Meta sempre recebe 200.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from app.infra.crypto import FlowCryptoError, decrypt_envelope, load_private_key, to_jwk

logger = logging.getLogger(__name__)


class FlowPayloadDecryptor:
    """Descriptografa envelopes com a chave privada configurada.

    A chave é carregada na primeira necessidade e reaproveitada pelo resto
    do processo. Carga com falha não é cacheada (próxima requisição tenta
    de novo). A chave nunca é logada.

    Args:
        private_key_pem: Chave privada PEM (vazia = descriptografia desabilitada)
        passphrase: Senha da chave (opcional)
    """

    def __init__(self, private_key_pem: str = "", passphrase: str | None = None) -> None:
        self._private_key_pem = private_key_pem
        self._passphrase = passphrase or None
        self._key: Any = None
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return bool(self._private_key_pem.strip())

    def decrypt(self, envelope: str) -> dict[str, Any] | None:
        """Tenta descriptografar o envelope.

        Returns:
            Payload descriptografado ou None (sem chave ou falha).
        """
        if not self.enabled:
            logger.debug(
                "flow_decryption_skipped",
                extra={"component": "payload_decryptor", "reason": "key_not_configured"},
            )
            return None

        try:
            key = self._get_key()
            payload = decrypt_envelope(envelope, key)
        except FlowCryptoError as exc:
            logger.warning(
                "flow_decryption_failed",
                extra={
                    "component": "payload_decryptor",
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return None

        logger.info(
            "flow_decrypted",
            extra={"component": "payload_decryptor", "field_count": len(payload)},
        )
        return payload

    def _get_key(self) -> Any:
        if self._key is not None:
            return self._key
        with self._lock:
            if self._key is None:
                private_key = load_private_key(self._private_key_pem, self._passphrase)
                self._key = to_jwk(private_key)
                logger.info(
                    "flow_private_key_loaded",
                    extra={"component": "payload_decryptor"},
                )
        return self._key
