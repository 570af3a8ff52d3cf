
from __future__ import annotations

"""Central exception hierarchy"""
class MaterialsError(Exception):
    """Base exception for all materials failures"""


class ConfigurationError(MaterialsError):
    """Raised for unsupported algorithms, invalid key lengths or bad provider setup"""


class MalformedMaterialsError(MaterialsError):
    """Raised when a material description cannot be used to recover a content key"""


class CryptographicMaterialsError(MaterialsError):
    """Raised when wrapping or unwrapping fails.

    The message is fixed so callers who control the description or the
    ciphertext learn nothing about which step failed.
    """

    def __init__(self, message: str = "Unable to process envelope key") -> None:
        super().__init__(message)
