"""Registry de providers → expressão compilada.

Populado uma única vez no startup e congelado antes de receber
tráfego. Após freeze(), leituras não precisam de lock.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from utils.errors import (
    DuplicateProviderError,
    InvalidProviderKeyError,
    RegistryFrozenError,
    UnknownProviderError,
)

if TYPE_CHECKING:
    from chargebacks.expressions import CompiledExpression

PROVIDER_KEY_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


def is_valid_provider_key(key: object) -> bool:
    """Retorna True se a chave segue o formato de provider (minúsculas)."""
    return isinstance(key, str) and PROVIDER_KEY_PATTERN.fullmatch(key) is not None


class ProviderRegistry:
    """Mapeamento provider_key → CompiledExpression.

    Política de registro:
    - Chave duplicada levanta DuplicateProviderError (fail-fast)
    - Registro após freeze() levanta RegistryFrozenError
    - resolve() é busca exata e case-sensitive
    """

    __slots__ = ("_expressions", "_frozen")

    def __init__(self) -> None:
        self._expressions: dict[str, CompiledExpression] = {}
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, key: str, expression: CompiledExpression) -> None:
        """Registra expressão para o provider.

        Raises:
            RegistryFrozenError: Se o registry já foi congelado
            InvalidProviderKeyError: Se a chave for inválida
            DuplicateProviderError: Se a chave já estiver registrada
        """
        if self._frozen:
            raise RegistryFrozenError(f"registry congelado, não é possível registrar '{key}'")
        if not is_valid_provider_key(key):
            raise InvalidProviderKeyError(f"chave de provider inválida: {key!r}")
        if key in self._expressions:
            raise DuplicateProviderError(f"provider já registrado: {key}")
        self._expressions[key] = expression

    def freeze(self) -> None:
        """Impede novos registros. Idempotente."""
        self._frozen = True

    def resolve(self, key: str) -> CompiledExpression:
        """Retorna a expressão do provider.

        Raises:
            UnknownProviderError: Se o provider não estiver registrado
        """
        try:
            return self._expressions[key]
        except (KeyError, TypeError):
            raise UnknownProviderError(str(key)) from None

    def keys(self) -> tuple[str, ...]:
        """Chaves registradas em ordem alfabética."""
        return tuple(sorted(self._expressions))

    def __contains__(self, key: object) -> bool:
        return key in self._expressions

    def __len__(self) -> int:
        return len(self._expressions)
