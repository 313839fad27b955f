"""Settings do relay de WhatsApp Flows.

Chave privada para descriptografar envelopes e destino do encaminhamento.
Ausência de qualquer um dos dois desabilita a funcionalidade correspondente,
sem falhar requests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from urllib.parse import urlparse

DEFAULT_FORWARD_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class FlowRelaySettings:
    """Configurações do endpoint de Flow.

    Attributes:
        private_key_pem: Chave privada PEM para envelopes (nunca logar)
        private_key_passphrase: Senha da chave PEM (opcional)
        forward_url: URL de destino do encaminhamento (ex: webhook do Make)
        forward_timeout_seconds: Timeout da chamada outbound
    """

    private_key_pem: str = field(default="", repr=False)
    private_key_passphrase: str = field(default="", repr=False)
    forward_url: str = ""
    forward_timeout_seconds: float = DEFAULT_FORWARD_TIMEOUT_SECONDS

    @property
    def decryption_enabled(self) -> bool:
        """True se há chave privada configurada."""
        return bool(self.private_key_pem.strip())

    @property
    def forward_enabled(self) -> bool:
        """True se há destino de encaminhamento configurado."""
        return bool(self.forward_url.strip())

    def validate(self) -> list[str]:
        """Valida configurações do relay.

        Chave e URL são opcionais; apenas valores presentes e inválidos
        geram erro.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.forward_timeout_seconds <= 0:
            errors.append("FORWARD_TIMEOUT_SECONDS deve ser > 0")

        if self.forward_enabled:
            parsed = urlparse(self.forward_url.strip())
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append("MAKE_WEBHOOK_URL deve ser uma URL http(s) válida")

        if self.decryption_enabled and "-----BEGIN" not in self.private_key_pem:
            errors.append("FLOW_PRIVATE_PEM não parece uma chave PEM")

        return errors


def _normalize_pem(raw_value: str) -> str:
    # Plataformas de deploy costumam achatar a PEM em uma linha com "\n" literal
    if "\\n" in raw_value and "\n" not in raw_value.strip():
        return raw_value.replace("\\n", "\n")
    return raw_value


def _load_from_env() -> FlowRelaySettings:
    """Carrega FlowRelaySettings a partir de variáveis de ambiente."""
    return FlowRelaySettings(
        private_key_pem=_normalize_pem(os.getenv("FLOW_PRIVATE_PEM", "")),
        private_key_passphrase=os.getenv("FLOW_PRIVATE_KEY_PASSPHRASE", ""),
        forward_url=os.getenv("MAKE_WEBHOOK_URL", "").strip(),
        forward_timeout_seconds=float(
            os.getenv("FORWARD_TIMEOUT_SECONDS", str(DEFAULT_FORWARD_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_flow_relay_settings() -> FlowRelaySettings:
    """Retorna instância cacheada de FlowRelaySettings.

    A cache garante que a configuração seja lida uma única vez por processo.
    """
    return _load_from_env()
