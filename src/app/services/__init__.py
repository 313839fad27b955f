"""Serviços de aplicação.

Classificação de requisições, descriptografia fail-open e encaminhamento
best-effort. Implementações concretas de IO ficam em app/infra/.
"""

from app.services.flow_request_classifier import (
    ENVELOPE_RULES,
    EnvelopeRule,
    MethodDecision,
    classify_method,
    classify_request,
)
from app.services.outbound_relay import OutboundRelay
from app.services.payload_decryptor import FlowPayloadDecryptor

__all__ = [
    "ENVELOPE_RULES",
    "EnvelopeRule",
    "FlowPayloadDecryptor",
    "MethodDecision",
    "OutboundRelay",
    "classify_method",
    "classify_request",
]
