"""Carregamento dos arquivos de mapeamento no startup.

Cada arquivo `<provider>.yaml` (ou `.yml`) do diretório vira uma
entrada no registry, com o nome do arquivo como chave. O carregamento
é atômico: qualquer erro interrompe o startup e nenhum registry
parcial é retornado.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from chargebacks.expressions import compile_source
from chargebacks.registry.provider_registry import ProviderRegistry
from utils.errors import DuplicateProviderError, MappingLoadError

if TYPE_CHECKING:
    from collections.abc import Callable

    from chargebacks.expressions import CompiledExpression

logger = logging.getLogger(__name__)

MAPPING_FILE_SUFFIXES = frozenset({".yaml", ".yml"})

# Diretório com os mapeamentos distribuídos junto ao pacote
DEFAULT_MAPPINGS_DIR = Path(__file__).resolve().parents[1] / "providers"


def discover_mapping_files(directory: Path) -> list[Path]:
    """Lista arquivos de mapeamento em ordem determinística.

    Raises:
        MappingLoadError: Se o diretório não existir
    """
    if not directory.is_dir():
        raise MappingLoadError(f"diretório de mapeamentos não encontrado: {directory}")
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in MAPPING_FILE_SUFFIXES
    )


def load_registry(
    directory: Path | str = DEFAULT_MAPPINGS_DIR,
    compiler: Callable[[str, str], CompiledExpression] = compile_source,
) -> ProviderRegistry:
    """Carrega, compila e congela o registry de providers.

    Args:
        directory: Diretório com um arquivo por provider
        compiler: Função (texto, nome) → CompiledExpression

    Returns:
        ProviderRegistry congelado

    Raises:
        MappingLoadError: Se o diretório ou um arquivo não puder ser lido
        DuplicateProviderError: Se dois arquivos tiverem a mesma chave
        CompileError: Se alguma expressão for inválida
    """
    directory = Path(directory)
    registry = ProviderRegistry()

    for path in discover_mapping_files(directory):
        key = path.stem
        if key in registry:
            raise DuplicateProviderError(f"mais de um arquivo para o provider '{key}'")
        try:
            source_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MappingLoadError(f"falha ao ler {path.name}: {exc}") from exc
        registry.register(key, compiler(source_text, key))

    registry.freeze()

    if len(registry) == 0:
        logger.warning(
            "provider_registry_empty",
            extra={"component": "registry", "mappings_dir": str(directory)},
        )
    else:
        logger.info(
            "provider_registry_loaded",
            extra={
                "component": "registry",
                "provider_count": len(registry),
                "providers": list(registry.keys()),
            },
        )
    return registry
