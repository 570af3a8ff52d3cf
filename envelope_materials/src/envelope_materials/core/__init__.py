"""Core exports."""
from .exceptions import (
    ConfigurationError,
    CryptographicMaterialsError,
    MalformedMaterialsError,
    MaterialsError,
)

__all__ = [
    "MaterialsError",
    "ConfigurationError",
    "MalformedMaterialsError",
    "CryptographicMaterialsError",
]
