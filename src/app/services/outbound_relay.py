"""Encaminhamento best-effort do payload para a automação downstream.

Sem retry e sem propagar erro: falhas de transporte e status não-2xx são
apenas logados. Sem URL configurada o encaminhamento é um no-op.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpError

if TYPE_CHECKING:
    from app.protocols.http_client import RelayHttpClientProtocol

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class OutboundRelay:
    """Envia um POST JSON por chamada ao destino configurado."""

    def __init__(self, http_client: RelayHttpClientProtocol, destination_url: str = "") -> None:
        self._http_client = http_client
        self._destination_url = destination_url.strip()

    @property
    def enabled(self) -> bool:
        return bool(self._destination_url)

    async def forward(self, payload: dict[str, Any]) -> bool:
        """Encaminha o payload.

        Returns:
            True se o destino respondeu 2xx; False em qualquer outro caso
            (inclusive relay desabilitado).
        """
        if not self.enabled:
            logger.debug(
                "flow_forward_skipped",
                extra={"component": "outbound_relay", "reason": "url_not_configured"},
            )
            return False

        started_at = time.perf_counter()
        try:
            response = await self._http_client.post(
                self._destination_url,
                json=payload,
                headers=JSON_HEADERS,
            )
        except HttpError as exc:
            logger.error(
                "flow_forward_failed",
                extra={
                    "component": "outbound_relay",
                    "error": str(exc),
                    "elapsed_ms": _elapsed_ms(started_at),
                },
            )
            return False
        except Exception as exc:
            logger.error(
                "flow_forward_failed",
                extra={
                    "component": "outbound_relay",
                    "error_type": type(exc).__name__,
                    "elapsed_ms": _elapsed_ms(started_at),
                },
            )
            return False

        status_code = response.status_code
        if not 200 <= status_code < 300:
            logger.warning(
                "flow_forward_rejected",
                extra={
                    "component": "outbound_relay",
                    "status_code": status_code,
                    "elapsed_ms": _elapsed_ms(started_at),
                },
            )
            return False

        logger.info(
            "flow_forwarded",
            extra={
                "component": "outbound_relay",
                "status_code": status_code,
                "elapsed_ms": _elapsed_ms(started_at),
            },
        )
        return True


def _elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)
