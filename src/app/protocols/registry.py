"""Protocolo do registry de providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chargebacks.expressions import CompiledExpression


class ProviderRegistryProtocol(Protocol):
    """Contrato mínimo para resolução de provider → expressão."""

    def resolve(self, key: str) -> CompiledExpression: ...

    def keys(self) -> tuple[str, ...]: ...
