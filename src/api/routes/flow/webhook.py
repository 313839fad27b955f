"""Endpoint único de WhatsApp Flows → automação downstream.

Fluxo:
1. GET: ack de liveness; métodos além de GET/POST: 405
2. POST: normaliza corpo → classifica → responde
   - challenge: ecoa o valor (handshake da Meta)
   - health check: base64("ok") em texto puro
   - evento: descriptografa (se houver envelope) → encaminha → 200 vazio

Segurança/disponibilidade:
- Falhas de descriptografia e de encaminhamento só aparecem nos logs
- Qualquer erro não tratado vira 200 vazio para não disparar retry da Meta
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.normalizers.flow import build_inbound_request, read_body
from api.routes.flow.responses import (
    ack_response,
    challenge_response,
    health_response,
    liveness_response,
    method_not_allowed_response,
)
from app.bootstrap.flow_factory import create_process_flow_event
from app.domain.flow_request import (
    Challenge,
    EncryptedEvent,
    HealthCheck,
    RequestMethod,
    category_name,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.services.flow_request_classifier import (
    MethodDecision,
    classify_method,
    classify_request,
)
from config.settings import get_flow_relay_settings

if TYPE_CHECKING:
    from app.use_cases.flow import ProcessFlowEventUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

HANDLED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

# Fallback quando o app não injetou o use case em app.state (lazy-loading)
_flow_event_use_case: ProcessFlowEventUseCase | None = None


def _get_flow_event_use_case(request: Request) -> ProcessFlowEventUseCase:
    """Obtém o use case injetado no startup ou cria a partir das settings."""
    global _flow_event_use_case
    app: Any = request.scope.get("app")
    injected = getattr(getattr(app, "state", None), "flow_event_use_case", None)
    if injected is not None:
        return injected
    if _flow_event_use_case is None:
        _flow_event_use_case = create_process_flow_event(get_flow_relay_settings())
    return _flow_event_use_case


@router.api_route("/", methods=HANDLED_METHODS, response_model=None)
async def handle_flow_webhook(request: Request) -> Response:
    """Recebe qualquer requisição no endpoint e devolve exatamente uma resposta."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        return await _dispatch(request)
    except Exception:
        logger.exception(
            "flow_webhook_unhandled_error",
            extra={"component": "flow_webhook", "correlation_id": get_correlation_id()},
        )
        return ack_response()
    finally:
        reset_correlation_id(token)


async def _dispatch(request: Request) -> Response:
    decision = classify_method(RequestMethod.from_http(request.method))
    if decision is MethodDecision.LIVENESS:
        return liveness_response()
    if decision is MethodDecision.NOT_ALLOWED:
        logger.info(
            "flow_method_not_allowed",
            extra={"component": "flow_webhook", "method": request.method},
        )
        return method_not_allowed_response()

    raw_body = await read_body(request.stream())
    inbound = build_inbound_request(request.method, request.headers, raw_body)
    category = classify_request(inbound)

    logger.info(
        "flow_request_classified",
        extra={
            "component": "flow_webhook",
            "category": category_name(category),
            "envelope_source": category.source if isinstance(category, EncryptedEvent) else None,
            "body_size": len(raw_body),
        },
    )

    if isinstance(category, Challenge):
        return challenge_response(category.value)
    if isinstance(category, HealthCheck):
        return health_response()

    use_case = _get_flow_event_use_case(request)
    result = await use_case.execute(category, inbound.parsed_body)
    logger.info(
        "flow_event_processed",
        extra={
            "component": "flow_webhook",
            "decrypted": result.decrypted,
            "fallback_used": result.fallback_used,
            "forwarded": result.forwarded,
        },
    )
    return ack_response()


async def flow_http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """Mantém o 405 em texto puro para métodos fora da lista da rota.

    Demais erros HTTP seguem o handler padrão do FastAPI.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.info(
            "flow_method_not_allowed",
            extra={"component": "flow_webhook", "method": request.method},
        )
        return method_not_allowed_response()
    return await http_exception_handler(request, exc)
