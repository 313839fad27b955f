"""Correlation_id por requisição do endpoint de Flow.

O valor vem do header `x-correlation-id` (ou é gerado) e é injetado em
todos os logs pelo CorrelationIdFilter. ContextVar isola requisições
concorrentes no mesmo event loop.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Header controlado pelo chamador; limita tamanho antes de ir para o log
MAX_CORRELATION_ID_LENGTH = 128


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido. Se vazio, gera um UUID v4.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = (correlation_id or "").strip()[:MAX_CORRELATION_ID_LENGTH]
    return _correlation_id.set(value or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)
