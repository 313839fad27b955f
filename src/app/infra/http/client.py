"""Cliente HTTP assíncrono para chamadas outbound (httpx).

Uma única tentativa por chamada, com timeout limitado: o encaminhamento é
best-effort e um destino lento não pode segurar a resposta à Meta.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Timeout por chamada
        transport: Transport httpx opcional (ex: MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia POST JSON e retorna a resposta, qualquer que seja o status.

        Raises:
            HttpError: Timeout, falha de conexão ou outro erro de transporte
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError(f"http_transport_error: {type(exc).__name__}") from exc
