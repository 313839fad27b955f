"""Modelos de domínio do endpoint de Flow.

InboundRequest é a visão normalizada de uma requisição HTTP; RequestCategory
é o resultado da classificação (exatamente uma variante por requisição).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from collections.abc import Mapping


class RequestMethod(str, Enum):
    """Métodos relevantes para o endpoint."""

    GET = "GET"
    POST = "POST"
    OTHER = "OTHER"

    @classmethod
    def from_http(cls, method: str) -> RequestMethod:
        upper = (method or "").upper()
        if upper == "GET":
            return cls.GET
        if upper == "POST":
            return cls.POST
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """Requisição normalizada, imutável durante o ciclo de vida da chamada.

    `headers` deve ter lookup case-insensitive (ex: starlette Headers).
    """

    method: RequestMethod
    headers: Mapping[str, str]
    raw_body: bytes = b""
    parsed_body: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class HealthCheck:
    """Health probe da plataforma."""


@dataclass(frozen=True, slots=True)
class Challenge:
    """Handshake de verificação; `value` é ecoado sem transformação."""

    value: Any


@dataclass(frozen=True, slots=True)
class EncryptedEvent:
    """Evento de negócio com envelope criptografado.

    Attributes:
        envelope: Token compacto (JWE)
        source: Nome da regra de extração que encontrou o envelope
    """

    envelope: str
    source: str = ""


@dataclass(frozen=True, slots=True)
class PlainEvent:
    """Evento sem envelope reconhecido; encaminhado como veio."""

    body: dict[str, Any]


RequestCategory = Union[HealthCheck, Challenge, EncryptedEvent, PlainEvent]


def category_name(category: RequestCategory) -> str:
    """Nome estável da categoria para logs."""
    if isinstance(category, HealthCheck):
        return "health_check"
    if isinstance(category, Challenge):
        return "challenge"
    if isinstance(category, EncryptedEvent):
        return "encrypted_event"
    return "plain_event"
