"""Normalizer do endpoint de WhatsApp Flows."""

from .body import build_inbound_request, normalize_body, parse_body, read_body

__all__ = [
    "build_inbound_request",
    "normalize_body",
    "parse_body",
    "read_body",
]
