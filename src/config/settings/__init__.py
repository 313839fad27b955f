"""Agregador de settings do Flow Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Flow endpoint settings
from config.settings.flow import (
    DEFAULT_FORWARD_TIMEOUT_SECONDS,
    FlowRelaySettings,
    get_flow_relay_settings,
)

__all__ = [
    # Constants
    "DEFAULT_FORWARD_TIMEOUT_SECONDS",
    # Base
    "BaseSettings",
    "Environment",
    # Flow
    "FlowRelaySettings",
    "get_base_settings",
    "get_flow_relay_settings",
]
