"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_flow_relay_settings

if TYPE_CHECKING:
    from config.settings import BaseSettings, FlowRelaySettings

logger = logging.getLogger(__name__)


def initialize_app(base_settings: BaseSettings | None = None) -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = base_settings or get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    base_settings: BaseSettings | None = None,
    flow_settings: FlowRelaySettings | None = None,
) -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    Chave e URL ausentes não são erro, apenas desabilitam a funcionalidade.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = base_settings or get_base_settings()
    flow = flow_settings or get_flow_relay_settings()

    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"flow: {error}" for error in flow.validate())

    logger.info(
        "flow_features_configured",
        extra={
            "component": "bootstrap",
            "decryption_enabled": flow.decryption_enabled,
            "forward_enabled": flow.forward_enabled,
            "forward_timeout_seconds": flow.forward_timeout_seconds,
        },
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
