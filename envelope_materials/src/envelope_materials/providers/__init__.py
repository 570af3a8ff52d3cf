"""Provider exports."""
from .asymmetric import AsymmetricStaticProvider, WrappingKeyPair
from .base import EncryptionMaterialsProvider
from .wrapped import WrappedMaterialsProvider

__all__ = [
    "EncryptionMaterialsProvider",
    "WrappedMaterialsProvider",
    "AsymmetricStaticProvider",
    "WrappingKeyPair",
]
