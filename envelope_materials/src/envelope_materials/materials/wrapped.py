"""Content key derivation and wrapping governed by a material description.

``WrappedMaterials`` never holds key material. Wrapping keys are passed into
each call, the content key is drawn from the injected random source, and every
algorithm choice is written back into the description so the decrypting side
can reverse it without sharing provider state.
"""

from __future__ import annotations

import binascii
from typing import Any, Mapping

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.keywrap import InvalidUnwrap

from ..core.exceptions import (
    ConfigurationError,
    CryptographicMaterialsError,
    MalformedMaterialsError,
)
from ..crypto.content_key import (
    ContentKey,
    content_key_from_bytes,
    generate_content_key,
    parse_content_key_algorithm,
)
from ..crypto.random import SYSTEM_RANDOM, RandomSource
from ..crypto.wrapping import default_transform_for, get_transform
from ..logging import get_logger
from ..utils.b64 import b64d, b64e
from ..utils.config import DEFAULT_CONFIG, MaterialsConfig
from .description import (
    CONTENT_KEY_ALGORITHM,
    ENVELOPE_KEY,
    KEY_WRAPPING_ALGORITHM,
    MaterialDescription,
)

_log = get_logger("wrapped_materials")

# Failures the cryptography backend raises for bad ciphertext, wrong keys or
# padding problems. All of them collapse into one opaque error.
_UNWRAP_FAILURES = (ValueError, TypeError, InvalidKey, InvalidUnwrap)


class WrappedMaterials:
    """Translate between a plaintext content key and its wrapped form"""

    __slots__ = ("_config", "_rng")

    def __init__(
        self,
        *,
        config: MaterialsConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._rng = random_source or SYSTEM_RANDOM

    @property
    def config(self) -> MaterialsConfig:
        return self._config

    def derive_content_key(self, description: Mapping[str, str]) -> tuple[ContentKey, MaterialDescription]:
        """Generate a fresh content key for the algorithm the description asks for.

        ``ALG`` selects the algorithm's default length, ``ALG/BITS`` an exact
        length. The returned description records the bare algorithm name; the
        length is implied by the wrapped key.
        """
        described = MaterialDescription(description)
        token = described.get(CONTENT_KEY_ALGORITHM)
        if token is None:
            algorithm, bits = self._config.content_key.algorithm, self._config.content_key.bits
        else:
            algorithm, bits = parse_content_key_algorithm(token)
        content_key = generate_content_key(algorithm, bits, self._rng)
        return content_key, described.updated({CONTENT_KEY_ALGORITHM: algorithm})

    def wrap(
        self, wrapping_key: Any, content_key: ContentKey, description: Mapping[str, str]
    ) -> tuple[bytes, MaterialDescription]:
        described = MaterialDescription(description)
        name = described.get(KEY_WRAPPING_ALGORITHM)
        if name is None:
            name = self._default_transform(wrapping_key)
        transform = get_transform(name)
        if not transform.accepts_wrapping_key(wrapping_key):
            raise ConfigurationError(
                f"{type(wrapping_key).__name__} cannot be used with key wrapping algorithm {name}"
            )
        try:
            wrapped = transform.wrap(wrapping_key, content_key.key)
        except (ValueError, TypeError) as exc:
            raise CryptographicMaterialsError() from exc
        return wrapped, described.updated({KEY_WRAPPING_ALGORITHM: name})

    def unwrap(self, unwrapping_key: Any, wrapped: bytes, description: Mapping[str, str]) -> ContentKey:
        described = MaterialDescription(description)
        name = described.get(KEY_WRAPPING_ALGORITHM)
        if not name:
            raise MalformedMaterialsError(f"Material description is missing {KEY_WRAPPING_ALGORITHM}")
        token = described.get(CONTENT_KEY_ALGORITHM)
        if not token:
            raise MalformedMaterialsError(f"Material description is missing {CONTENT_KEY_ALGORITHM}")
        try:
            transform = get_transform(name)
            algorithm, bits = parse_content_key_algorithm(token)
        except ConfigurationError as exc:
            raise MalformedMaterialsError(str(exc)) from None
        if not transform.accepts_unwrapping_key(unwrapping_key):
            raise MalformedMaterialsError(
                f"Key wrapping algorithm {name} does not match the provider's unwrapping key"
            )

        try:
            raw = transform.unwrap(unwrapping_key, wrapped)
            return content_key_from_bytes(algorithm, raw, bits)
        except _UNWRAP_FAILURES:
            _log.warning("unwrap.failed", key_wrapping_alg=name)
            raise CryptographicMaterialsError() from None

    def seal(self, wrapping_key: Any, description: Mapping[str, str]) -> tuple[ContentKey, MaterialDescription]:
        """Derive and wrap a content key, recording the wrapped bytes in the description"""
        content_key, described = self.derive_content_key(description)
        wrapped, described = self.wrap(wrapping_key, content_key, described)
        return content_key, described.updated({ENVELOPE_KEY: b64e(wrapped)})

    def open(self, unwrapping_key: Any, description: Mapping[str, str]) -> ContentKey:
        """Recover the content key sealed into ``description``"""
        encoded = description.get(ENVELOPE_KEY)
        if not encoded:
            raise MalformedMaterialsError(f"Material description is missing {ENVELOPE_KEY}")
        try:
            wrapped = b64d(encoded)
        except (binascii.Error, ValueError):
            raise MalformedMaterialsError(f"{ENVELOPE_KEY} is not valid base64") from None
        if not wrapped:
            raise MalformedMaterialsError(f"{ENVELOPE_KEY} is empty")
        return self.unwrap(unwrapping_key, wrapped, description)

    def _default_transform(self, key: Any) -> str:
        return default_transform_for(
            key,
            rsa_default=self._config.wrapping.rsa,
            symmetric_default=self._config.wrapping.symmetric,
        )


__all__ = ["WrappedMaterials"]
