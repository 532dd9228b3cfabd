"""API — camada de borda e adapters externos.

Responsabilidades:
- Receber requisições do softphone
- Validar assinatura do cliente e bearer token
- Chamar APIs externas (voip.ms, eco de IP)
- Construir as respostas no contrato do Groundwire

Subpastas:
- connectors/: adapters HTTP por provedor
- payload_builders/: construção das respostas
- validators/: validação de requisições de entrada
- routes/: endpoints HTTP (saldo, health)

NÃO PODE conter: orquestração de use cases.
"""
