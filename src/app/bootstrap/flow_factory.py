"""Factory de wiring do endpoint de Flow (bootstrap).

As implementações concretas (crypto, httpx) só são conectadas aqui.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig
from app.services.outbound_relay import OutboundRelay
from app.services.payload_decryptor import FlowPayloadDecryptor
from app.use_cases.flow import ProcessFlowEventUseCase

if TYPE_CHECKING:
    import httpx

    from config.settings import FlowRelaySettings


def create_payload_decryptor(settings: FlowRelaySettings) -> FlowPayloadDecryptor:
    """Cria o decryptor com a chave configurada (carga lazy)."""
    return FlowPayloadDecryptor(
        private_key_pem=settings.private_key_pem,
        passphrase=settings.private_key_passphrase or None,
    )


def create_outbound_relay(
    settings: FlowRelaySettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OutboundRelay:
    """Cria o relay com timeout limitado.

    Args:
        settings: Settings do relay
        transport: Transport httpx opcional (testes)
    """
    http_client = HttpClient(
        HttpClientConfig(timeout_seconds=settings.forward_timeout_seconds),
        transport=transport,
    )
    return OutboundRelay(http_client=http_client, destination_url=settings.forward_url)


def create_process_flow_event(
    settings: FlowRelaySettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProcessFlowEventUseCase:
    """Cria o use case de eventos de Flow com dependências injetadas."""
    return ProcessFlowEventUseCase(
        decryptor=create_payload_decryptor(settings),
        relay=create_outbound_relay(settings, transport=transport),
    )
