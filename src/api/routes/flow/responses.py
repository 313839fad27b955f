"""Contratos de resposta do endpoint de Flow.

Cada ramo do pipeline termina em exatamente uma destas respostas.
"""

from __future__ import annotations

import base64
from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

# Health probe da Meta espera base64("ok") em texto puro, não JSON
HEALTH_CHECK_BODY = base64.b64encode(b"ok").decode("ascii")

ALLOWED_METHODS = "GET, POST"


def liveness_response() -> JSONResponse:
    """GET: ack estático de liveness."""
    return JSONResponse(content={"status": "ok"}, status_code=status.HTTP_200_OK)


def challenge_response(value: Any) -> JSONResponse:
    """Handshake: ecoa o challenge sem validação nem conversão de tipo."""
    return JSONResponse(content={"challenge": value}, status_code=status.HTTP_200_OK)


def health_response() -> PlainTextResponse:
    return PlainTextResponse(content=HEALTH_CHECK_BODY, status_code=status.HTTP_200_OK)


def ack_response() -> Response:
    """200 com corpo vazio (eventos e faltas internas)."""
    return Response(status_code=status.HTTP_200_OK)


def method_not_allowed_response() -> PlainTextResponse:
    return PlainTextResponse(
        content="Method Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ALLOWED_METHODS},
    )
