"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (saldo do Groundwire, health)
- Ler headers relevantes da requisição
- Delegar para use cases via app/bootstrap
- Respostas HTTP apropriadas

Estrutura:
- routes/groundwire/: endpoint do Balance Checker
- routes/health/: liveness probe

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
