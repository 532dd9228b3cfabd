"""Limites e padrões do User-Agent aceito do Groundwire."""

from __future__ import annotations

import re

GROUNDWIRE_MARKER = "Groundwire/"
MAX_USER_AGENT_LENGTH = 200
USER_AGENT_PATTERN = re.compile(r"[A-Za-z0-9 ./\-_();]+")
BEARER_PREFIX = "Bearer "
TOKEN_FINGERPRINT_LENGTH = 8
