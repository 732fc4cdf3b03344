"""Exceções de domínio do normalizador de chargebacks.

Hierarquia:
- MappingConfigError: falhas de configuração detectadas no startup (fatais)
- UnknownProviderError: provider não registrado (por requisição)
- EvaluationError: falha ao executar uma expressão de mapeamento (por requisição)
"""

from __future__ import annotations


class ChargebackMapperError(Exception):
    """Base para todas as falhas do normalizador."""


class MappingConfigError(ChargebackMapperError):
    """Base para erros de configuração de mapeamentos (startup)."""


class CompileError(MappingConfigError):
    """Expressão de mapeamento malformada ou com construção não suportada."""

    def __init__(self, message: str, source_name: str = "") -> None:
        self.source_name = source_name
        prefix = f"{source_name}: " if source_name else ""
        super().__init__(f"{prefix}{message}")


class MappingLoadError(MappingConfigError):
    """Falha ao ler arquivos de mapeamento do diretório configurado."""


class InvalidProviderKeyError(MappingConfigError):
    """Chave de provider fora do formato aceito."""


class DuplicateProviderError(MappingConfigError):
    """Provider registrado mais de uma vez."""


class RegistryFrozenError(MappingConfigError):
    """Tentativa de registro após o registry ter sido congelado."""


class UnknownProviderError(ChargebackMapperError):
    """Provider solicitado não existe no registry."""

    def __init__(self, provider_key: str) -> None:
        self.provider_key = provider_key
        super().__init__(f"Unknown provider: {provider_key}")


class EvaluationError(ChargebackMapperError):
    """Falha em tempo de execução ao avaliar uma expressão."""


class EvaluationTimeoutError(EvaluationError):
    """Avaliação excedeu o prazo configurado."""
