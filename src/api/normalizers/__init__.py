"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- flow/: corpo do endpoint de WhatsApp Flows → InboundRequest
"""

from .flow import build_inbound_request, normalize_body, parse_body, read_body

__all__ = [
    "build_inbound_request",
    "normalize_body",
    "parse_body",
    "read_body",
]
