"""Agregador de settings do serviço de saldo Groundwire.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Cliente (softphone)
from config.settings.groundwire import (
    DEFAULT_CURRENCY,
    GroundwireSettings,
    get_groundwire_settings,
)

# Provedor de billing
from config.settings.voipms import (
    IP_ECHO_URL,
    VOIPMS_API_URL,
    Credentials,
    VoipMsSettings,
    get_voipms_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CURRENCY",
    "IP_ECHO_URL",
    "VALID_LOG_LEVELS",
    "VOIPMS_API_URL",
    # Base
    "BaseSettings",
    "Credentials",
    "Environment",
    # Channels
    "GroundwireSettings",
    "VoipMsSettings",
    "get_base_settings",
    "get_groundwire_settings",
    "get_voipms_settings",
]
