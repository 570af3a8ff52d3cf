"""
envelope_materials
~~~~~~~~~~~~~~~~~~

Envelope encryption materials for record-level client-side encryption:
fresh content keys wrapped under a long-lived key, static signing credentials,
and the material description that records how to reverse each step.
"""

__title__ = "envelope_materials"
__version__ = "0.1.0"

import logging as _logging

from .context import EncryptionContext
from .core.exceptions import (
    ConfigurationError,
    CryptographicMaterialsError,
    MalformedMaterialsError,
    MaterialsError,
)
from .crypto.content_key import ContentKey
from .crypto.random import RandomSource, SystemRandomSource
from .materials import (
    CONTENT_KEY_ALGORITHM,
    ENVELOPE_KEY,
    KEY_WRAPPING_ALGORITHM,
    CredentialKind,
    DecryptionMaterials,
    EncryptionMaterials,
    MacSecret,
    MaterialDescription,
    SignatureKeyPair,
    SigningCredential,
    WrappedMaterials,
    merge_descriptions,
)
from .providers import (
    AsymmetricStaticProvider,
    EncryptionMaterialsProvider,
    WrappedMaterialsProvider,
    WrappingKeyPair,
)

__all__ = [
    "EncryptionContext",
    "MaterialsError",
    "ConfigurationError",
    "MalformedMaterialsError",
    "CryptographicMaterialsError",
    "ContentKey",
    "RandomSource",
    "SystemRandomSource",
    "CONTENT_KEY_ALGORITHM",
    "ENVELOPE_KEY",
    "KEY_WRAPPING_ALGORITHM",
    "CredentialKind",
    "DecryptionMaterials",
    "EncryptionMaterials",
    "MacSecret",
    "MaterialDescription",
    "SignatureKeyPair",
    "SigningCredential",
    "WrappedMaterials",
    "merge_descriptions",
    "AsymmetricStaticProvider",
    "EncryptionMaterialsProvider",
    "WrappedMaterialsProvider",
    "WrappingKeyPair",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

del _logging
