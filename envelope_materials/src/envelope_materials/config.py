# Configuration for the materials providers (default algorithms, key sizes, logging).

from .utils.config import (
    DEFAULT_CONFIG,
    ContentKeyDefaults,
    LoggingConfig,
    MaterialsConfig,
    WrappingDefaults,
    dump_default_config,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ContentKeyDefaults",
    "LoggingConfig",
    "MaterialsConfig",
    "WrappingDefaults",
    "dump_default_config",
    "load_config",
]
