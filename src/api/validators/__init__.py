"""Validators — validação de requisições de entrada por cliente.

Estrutura:
- groundwire/: assinatura (User-Agent) e bearer token do softphone

Cada cliente tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
