"""Protocolo de descriptografia de envelopes de Flow.

Use cases dependem desta abstração, não da infra de crypto concreta.
"""

from __future__ import annotations

from typing import Any, Protocol


class PayloadDecryptorProtocol(Protocol):
    """Descriptografa um envelope; None quando não há resultado.

    Implementações nunca levantam exceção para o chamador.
    """

    def decrypt(self, envelope: str) -> dict[str, Any] | None: ...
