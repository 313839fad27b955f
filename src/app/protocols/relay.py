"""Protocolo do encaminhamento outbound."""

from __future__ import annotations

from typing import Any, Protocol


class OutboundRelayProtocol(Protocol):
    """Encaminha payload JSON ao destino configurado (best-effort).

    Retorna True se o destino respondeu 2xx; nunca levanta exceção.
    """

    async def forward(self, payload: dict[str, Any]) -> bool: ...
