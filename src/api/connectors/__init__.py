"""Connectors — adapters de borda para webhooks de providers.

Estrutura:
- webhook/: parsing do corpo e detecção de provider
"""

__all__: list[str] = []
