"""API — camada de borda HTTP.

Responsabilidades:
- Receber webhooks de providers de pagamento
- Desserializar o corpo e decidir o provider
- Delegar ao pipeline e serializar o desfecho

Subpastas:
- connectors/: parsing do corpo e detecção de provider
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: lógica de mapeamento, validação de schema, FSM.
"""
