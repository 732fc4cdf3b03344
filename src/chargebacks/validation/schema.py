"""Contrato do registro normalizado de chargeback."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NormalizedChargeback(BaseModel):
    """Registro normalizado que todo provider deve produzir.

    Modelo estrito: nenhuma coerção de tipo é feita aqui. Conversões
    (centavos → unidades, minúsculas → maiúsculas) são responsabilidade
    da expressão de mapeamento.

    Attributes:
        transaction_id: Identificador da transação contestada
        reason: Motivo da disputa informado pelo provider
        currency: Código ISO 4217 em maiúsculas
        amount: Valor em unidades decimais da moeda
        provider: Chave do provider de origem
    """

    model_config = ConfigDict(strict=True, extra="allow", frozen=True)

    transaction_id: str
    reason: str
    currency: str
    amount: float
    provider: str
