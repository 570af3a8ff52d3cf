
from __future__ import annotations

from abc import ABC, abstractmethod

from ..context import EncryptionContext
from ..materials.results import DecryptionMaterials, EncryptionMaterials


class EncryptionMaterialsProvider(ABC):
    """Capability contract shared by static and key-service backed providers"""

    @abstractmethod
    def get_encryption_materials(self, context: EncryptionContext) -> EncryptionMaterials:
        raise NotImplementedError

    @abstractmethod
    def get_decryption_materials(self, context: EncryptionContext) -> DecryptionMaterials:
        raise NotImplementedError

    @abstractmethod
    def refresh(self) -> None:
        """Drop any cached key material. Providers without a cache do nothing."""
        raise NotImplementedError


__all__ = ["EncryptionMaterialsProvider"]
