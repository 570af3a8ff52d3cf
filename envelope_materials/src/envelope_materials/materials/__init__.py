"""Materials package exports."""
from .description import (
    CONTENT_KEY_ALGORITHM,
    ENVELOPE_KEY,
    KEY_WRAPPING_ALGORITHM,
    MaterialDescription,
    merge_descriptions,
)
from .results import DecryptionMaterials, EncryptionMaterials
from .signing import CredentialKind, MacSecret, SignatureKeyPair, SigningCredential
from .wrapped import WrappedMaterials

__all__ = [
    "CONTENT_KEY_ALGORITHM",
    "ENVELOPE_KEY",
    "KEY_WRAPPING_ALGORITHM",
    "MaterialDescription",
    "merge_descriptions",
    "EncryptionMaterials",
    "DecryptionMaterials",
    "CredentialKind",
    "MacSecret",
    "SignatureKeyPair",
    "SigningCredential",
    "WrappedMaterials",
]
