"""Filters de logging para injeção de contexto e redação.

- CorrelationIdFilter: adiciona correlation_id e service a cada record
- SecretRedactionFilter: mascara atributos sensíveis passados via `extra`

Chave privada, envelope e payload descriptografado nunca devem chegar
ao handler em texto claro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

DEFAULT_SENSITIVE_FIELDS = frozenset(
    {
        "private_key",
        "private_key_pem",
        "passphrase",
        "envelope",
        "plaintext",
        "payload",
        "raw_body",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Substitui atributos sensíveis do record por um marcador fixo."""

    def __init__(self, sensitive_fields: Iterable[str] | None = None) -> None:
        super().__init__()
        self._fields = frozenset(sensitive_fields or DEFAULT_SENSITIVE_FIELDS)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            if name in record.__dict__:
                setattr(record, name, REDACTED)
        return True
