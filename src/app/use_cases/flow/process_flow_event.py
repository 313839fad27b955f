"""Use case: evento de negócio do Flow → descriptografia → encaminhamento."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.flow_request import EncryptedEvent
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.flow_request import PlainEvent
    from app.protocols.crypto import PayloadDecryptorProtocol
    from app.protocols.relay import OutboundRelayProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlowEventResult:
    """Resumo do processamento (sem payload)."""

    decrypted: bool
    fallback_used: bool
    forwarded: bool


class ProcessFlowEventUseCase:
    """Encaminha o payload descriptografado ou, na falha, o corpo original.

    O relay recebe exatamente um dos dois por execução; não há cache nem
    dedupe entre execuções.
    """

    def __init__(
        self,
        decryptor: PayloadDecryptorProtocol,
        relay: OutboundRelayProtocol,
    ) -> None:
        self._decryptor = decryptor
        self._relay = relay

    async def execute(
        self,
        event: EncryptedEvent | PlainEvent,
        original_body: dict[str, Any],
    ) -> FlowEventResult:
        """Processa o evento.

        Args:
            event: EncryptedEvent ou PlainEvent vindo do classificador
            original_body: Corpo parseado da requisição (fallback)
        """
        decrypted: dict[str, Any] | None = None
        fallback_used = False

        if isinstance(event, EncryptedEvent):
            # RSA é CPU-bound; to_thread preserva o contexto (correlation_id)
            decrypted = await asyncio.to_thread(self._decryptor.decrypt, event.envelope)
            if decrypted is None:
                fallback_used = True
                log_fallback(logger, "payload_decryptor", reason="forward_original_body")

        payload = decrypted if decrypted is not None else original_body
        forwarded = await self._relay.forward(payload)

        return FlowEventResult(
            decrypted=decrypted is not None,
            fallback_used=fallback_used,
            forwarded=forwarded,
        )
