"""App — orquestração, domínio, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- constants/: taxonomia de erros e vocabulário da voip.ms
- domain/: modelos da consulta de saldo (resultado explícito)
- use_cases/: casos de uso (sem IO direto, só protocolos)
- infra/: implementações concretas de IO (HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura.
"""
