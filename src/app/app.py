"""Entrypoint da aplicação Flow Relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.flow.webhook import flow_http_exception_handler
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.flow_factory import create_process_flow_event
from config.logging import get_logger
from config.settings import get_base_settings, get_flow_relay_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from config.settings import FlowRelaySettings

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)


def create_app(settings: FlowRelaySettings | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: Settings do relay; lidas do ambiente se None (testes
            injetam uma instância própria).

    Returns:
        Aplicação FastAPI configurada.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Valida settings e monta o pipeline uma única vez por processo."""
        flow_settings = settings or get_flow_relay_settings()
        base_settings = get_base_settings()
        logger.info("app_starting", extra={"service": base_settings.service_name})
        validate_runtime_settings(base_settings, flow_settings)
        app.state.flow_settings = flow_settings
        app.state.flow_event_use_case = create_process_flow_event(flow_settings)

        yield

        logger.info("app_shutting_down", extra={"service": base_settings.service_name})

    fastapi_app = FastAPI(
        title="Flow Relay",
        description="Endpoint de WhatsApp Flows com encaminhamento para automação",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    fastapi_app.include_router(create_api_router())
    fastapi_app.add_exception_handler(StarletteHTTPException, flow_http_exception_handler)

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    logger.info("Starting Flow Relay")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
    )


if __name__ == "__main__":
    main()
