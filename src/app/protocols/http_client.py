"""Protocolos HTTP usados pelo app.

Evita dependência direta do cliente concreto (httpx).
"""

from __future__ import annotations

from typing import Any, Protocol


class HttpResponseProtocol(Protocol):
    """Contrato mínimo da resposta HTTP."""

    status_code: int


class RelayHttpClientProtocol(Protocol):
    """Contrato mínimo para o cliente HTTP do relay."""

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> HttpResponseProtocol: ...
