"""Protocolos e contratos do core da aplicação."""

from .crypto import PayloadDecryptorProtocol
from .http_client import HttpResponseProtocol, RelayHttpClientProtocol
from .relay import OutboundRelayProtocol

__all__ = [
    "HttpResponseProtocol",
    "OutboundRelayProtocol",
    "PayloadDecryptorProtocol",
    "RelayHttpClientProtocol",
]
