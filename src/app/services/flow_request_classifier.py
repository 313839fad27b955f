"""Classificação de requisições do endpoint de Flow.

Precedência (primeira regra que casar vence):
1. GET → ack de liveness (antes de ler o corpo)
2. método diferente de GET/POST → 405
3. `challenge` truthy → Challenge
4. health check (campo, tipo ou header) → HealthCheck
5. envelope encontrado pelas regras de extração → EncryptedEvent
6. caso contrário → PlainEvent

O contrato de fio da Meta evoluiu (v1/v2 do campo do envelope), então as
regras de extração são uma lista ordenada; novos campos entram no final.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from app.domain.flow_request import (
    Challenge,
    EncryptedEvent,
    HealthCheck,
    PlainEvent,
    RequestCategory,
    RequestMethod,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from app.domain.flow_request import InboundRequest

HEALTH_CHECK_HEADER = "x-meta-health-check"


class MethodDecision(str, Enum):
    """Decisão tomada apenas pelo método HTTP."""

    LIVENESS = "liveness"
    NOT_ALLOWED = "not_allowed"
    PROCESS = "process"


@dataclass(frozen=True, slots=True)
class EnvelopeRule:
    """Regra de extração: caminho de chaves até o envelope no corpo."""

    name: str
    path: tuple[str, ...]

    def extract(self, body: Mapping[str, Any]) -> str | None:
        node: Any = body
        for key in self.path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
        if isinstance(node, str) and node:
            return node
        return None


ENVELOPE_RULES: tuple[EnvelopeRule, ...] = (
    EnvelopeRule("encrypted_flow_data", ("encrypted_flow_data",)),
    EnvelopeRule("encrypted_flow_data_v2", ("encrypted_flow_data_v2",)),
    EnvelopeRule("data.encrypted_flow_data", ("data", "encrypted_flow_data")),
)


def classify_method(method: RequestMethod) -> MethodDecision:
    """Aplica as regras 1 e 2, que não dependem do corpo."""
    if method is RequestMethod.GET:
        return MethodDecision.LIVENESS
    if method is RequestMethod.POST:
        return MethodDecision.PROCESS
    return MethodDecision.NOT_ALLOWED


def is_truthy(value: Any) -> bool:
    """Truthiness de valor JSON na semântica do JavaScript.

    null, false, 0 e "" são falsy; listas e objetos vazios são truthy.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def is_health_check(body: Mapping[str, Any], headers: Mapping[str, str]) -> bool:
    if body.get("health_check") is True:
        return True
    if body.get("type") == "health_check":
        return True
    return headers.get(HEALTH_CHECK_HEADER) == "1"


def find_envelope(
    body: Mapping[str, Any],
    rules: Sequence[EnvelopeRule] = ENVELOPE_RULES,
) -> EncryptedEvent | None:
    """Procura o envelope seguindo a ordem das regras.

    Returns:
        EncryptedEvent com o primeiro envelope não vazio, ou None.
    """
    for rule in rules:
        envelope = rule.extract(body)
        if envelope is not None:
            return EncryptedEvent(envelope=envelope, source=rule.name)
    return None


def classify_request(
    request: InboundRequest,
    rules: Sequence[EnvelopeRule] = ENVELOPE_RULES,
) -> RequestCategory:
    """Classifica um POST já normalizado (regras 3 a 6).

    Função pura e total: toda requisição recebe exatamente uma categoria.

    Args:
        request: Requisição normalizada
        rules: Regras de extração do envelope, em ordem de prioridade

    Returns:
        Challenge, HealthCheck, EncryptedEvent ou PlainEvent
    """
    body = request.parsed_body

    challenge = body.get("challenge")
    if is_truthy(challenge):
        return Challenge(value=challenge)

    if is_health_check(body, request.headers):
        return HealthCheck()

    encrypted = find_envelope(body, rules)
    if encrypted is not None:
        return encrypted

    return PlainEvent(body=body)
