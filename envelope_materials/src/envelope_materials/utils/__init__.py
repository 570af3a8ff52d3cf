
from __future__ import annotations

from .b64 import b64d, b64e
from .config import DEFAULT_CONFIG, MaterialsConfig, load_config

__all__ = [
    "b64e",
    "b64d",
    "DEFAULT_CONFIG",
    "MaterialsConfig",
    "load_config",
]
