"""Registry de providers e carregamento de mapeamentos."""

from chargebacks.registry.loader import (
    DEFAULT_MAPPINGS_DIR,
    MAPPING_FILE_SUFFIXES,
    discover_mapping_files,
    load_registry,
)
from chargebacks.registry.provider_registry import (
    PROVIDER_KEY_PATTERN,
    ProviderRegistry,
    is_valid_provider_key,
)

__all__ = [
    "DEFAULT_MAPPINGS_DIR",
    "MAPPING_FILE_SUFFIXES",
    "PROVIDER_KEY_PATTERN",
    "ProviderRegistry",
    "discover_mapping_files",
    "is_valid_provider_key",
    "load_registry",
]
