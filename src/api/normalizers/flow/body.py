"""Normalização do corpo de requisições do endpoint de Flow.

Nunca levanta erro por input malformado: o classificador sempre recebe
um dict (possivelmente vazio).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from app.domain.flow_request import InboundRequest, RequestMethod

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Mapping


async def read_body(chunks: AsyncIterator[bytes]) -> bytes:
    """Acumula o stream do corpo até o fim (consome o stream uma vez)."""
    buffer = bytearray()
    async for chunk in chunks:
        if chunk:
            buffer.extend(chunk)
    return bytes(buffer)


def _reject_constant(name: str) -> Any:
    # NaN e Infinity não são JSON válido
    raise ValueError(f"invalid JSON constant: {name}")


def parse_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo como objeto JSON estrito; qualquer falha vira {}."""
    if not raw_body:
        return {}
    try:
        payload = json.loads(raw_body.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError):
        return {}
    if not isinstance(payload, dict):
        return {}
    return payload


def normalize_body(
    raw_body: bytes,
    pre_parsed: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Retorna o corpo parseado.

    Args:
        raw_body: Corpo bruto lido do stream
        pre_parsed: Objeto já parseado pelo transporte, usado quando não vazio

    Returns:
        Dict do corpo (vazio se ausente ou malformado)
    """
    if isinstance(pre_parsed, dict) and pre_parsed:
        return dict(pre_parsed)
    return parse_body(raw_body)


def build_inbound_request(
    method: str,
    headers: Mapping[str, str],
    raw_body: bytes,
    pre_parsed: Mapping[str, Any] | None = None,
) -> InboundRequest:
    """Monta o InboundRequest imutável da chamada."""
    return InboundRequest(
        method=RequestMethod.from_http(method),
        headers=headers,
        raw_body=raw_body,
        parsed_body=normalize_body(raw_body, pre_parsed),
    )
