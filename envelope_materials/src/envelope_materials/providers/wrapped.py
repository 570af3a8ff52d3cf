
from __future__ import annotations

from typing import Any, Mapping

from ..context import EncryptionContext
from ..core.exceptions import ConfigurationError
from ..crypto.random import RandomSource
from ..logging import get_logger
from ..materials.description import (
    CONTENT_KEY_ALGORITHM,
    KEY_WRAPPING_ALGORITHM,
    MaterialDescription,
    merge_descriptions,
    overridden_keys,
)
from ..materials.results import DecryptionMaterials, EncryptionMaterials
from ..materials.signing import CredentialKind, SigningCredential, signing_key, verification_key
from ..materials.wrapped import WrappedMaterials
from ..utils.config import MaterialsConfig
from .base import EncryptionMaterialsProvider

_log = get_logger("provider")


class WrappedMaterialsProvider(EncryptionMaterialsProvider):
    """Wrap fresh content keys under a fixed wrapping key.

    ``wrapping_key`` and ``unwrapping_key`` are the two halves used for each
    direction: an RSA public/private pair, or the same AES key-encryption key
    twice. Nothing is mutated after construction, so one instance may serve
    any number of threads.
    """

    __slots__ = ("_wrapping_key", "_unwrapping_key", "_credential", "_description", "_materials")

    def __init__(
        self,
        wrapping_key: Any,
        unwrapping_key: Any,
        signing_credential: SigningCredential,
        description: Mapping[str, str] | None = None,
        *,
        config: MaterialsConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._wrapping_key = wrapping_key
        self._unwrapping_key = unwrapping_key
        self._credential = signing_credential
        self._description = MaterialDescription(description)
        self._materials = WrappedMaterials(config=config, random_source=random_source)
        if not isinstance(getattr(signing_credential, "kind", None), CredentialKind):
            raise ConfigurationError("Signing credential must be a MacSecret or SignatureKeyPair")

    @property
    def description(self) -> MaterialDescription:
        return self._description

    @property
    def signing_credential(self) -> SigningCredential:
        return self._credential

    def get_encryption_materials(self, context: EncryptionContext) -> EncryptionMaterials:
        requested = context.material_description
        ignored = overridden_keys(self._description, requested)
        if ignored:
            _log.debug("description.fixed_entries_kept", keys=ignored)
        merged = merge_descriptions(self._description, requested)
        content_key, described = self._materials.seal(self._wrapping_key, merged)
        _log.debug(
            "encryption_materials.produced",
            content_key_alg=described[CONTENT_KEY_ALGORITHM],
            key_wrapping_alg=described[KEY_WRAPPING_ALGORITHM],
            credential=self._credential.kind.value,
        )
        return EncryptionMaterials(
            content_key=content_key,
            signing_key=signing_key(self._credential),
            material_description=described,
        )

    def get_decryption_materials(self, context: EncryptionContext) -> DecryptionMaterials:
        described = context.material_description
        content_key = self._materials.open(self._unwrapping_key, described)
        _log.debug(
            "decryption_materials.produced",
            content_key_alg=content_key.algorithm,
            key_wrapping_alg=described.get(KEY_WRAPPING_ALGORITHM),
            credential=self._credential.kind.value,
        )
        return DecryptionMaterials(
            content_key=content_key,
            verification_key=verification_key(self._credential),
            material_description=described,
        )

    def refresh(self) -> None:
        """Keys are static for the provider's lifetime; nothing to refresh."""


__all__ = ["WrappedMaterialsProvider"]
