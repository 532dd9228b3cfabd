"""Payload builders — construção das respostas enviadas aos clientes.

Estrutura:
- groundwire/: contrato JSON do Balance Checker do Groundwire

Cada cliente tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
