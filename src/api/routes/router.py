"""Agregador de rotas: registra os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.flow.webhook import router as flow_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Endpoint único na raiz (handshake, health probe e eventos do Flow)
    api_router.include_router(flow_router, tags=["flow"])

    return api_router
