"""Connectors — adapters de borda para APIs externas.

Estrutura:
- voipms/: API REST da voip.ms (saldo da conta)
- ipecho/: serviço público de eco de IP (diagnóstico)

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
