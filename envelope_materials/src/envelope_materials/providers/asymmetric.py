
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..core.exceptions import ConfigurationError
from ..crypto.random import RandomSource
from ..materials.signing import SigningCredential
from ..utils.config import DEFAULT_CONFIG, MaterialsConfig
from .wrapped import WrappedMaterialsProvider


@dataclass(frozen=True, slots=True)
class WrappingKeyPair:
    """Long-lived RSA pair: the public half wraps, the private half unwraps"""

    public_key: rsa.RSAPublicKey
    private_key: rsa.RSAPrivateKey

    @classmethod
    def from_private_key(cls, private_key: rsa.RSAPrivateKey) -> "WrappingKeyPair":
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise ConfigurationError("Expected RSA private key")
        return cls(public_key=private_key.public_key(), private_key=private_key)

    @classmethod
    def from_pem(cls, pem: bytes, passphrase: bytes | None = None) -> "WrappingKeyPair":
        try:
            key = serialization.load_pem_private_key(pem, password=passphrase)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise ConfigurationError("Unable to load wrapping private key") from exc
        return cls.from_private_key(key)


class AsymmetricStaticProvider(WrappedMaterialsProvider):
    """Static provider wrapping every content key under one RSA key pair"""

    __slots__ = ("_key_pair",)

    def __init__(
        self,
        key_pair: WrappingKeyPair,
        signing_credential: SigningCredential,
        description: Mapping[str, str] | None = None,
        *,
        config: MaterialsConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        _validate_key_pair(key_pair, (config or DEFAULT_CONFIG).wrapping.min_rsa_key_bits)
        self._key_pair = key_pair
        super().__init__(
            key_pair.public_key,
            key_pair.private_key,
            signing_credential,
            description,
            config=config,
            random_source=random_source,
        )

    @property
    def key_pair(self) -> WrappingKeyPair:
        return self._key_pair


def _validate_key_pair(key_pair: WrappingKeyPair, min_bits: int) -> None:
    if not isinstance(key_pair.public_key, rsa.RSAPublicKey):
        raise ConfigurationError("Wrapping public key must be an RSA public key")
    if not isinstance(key_pair.private_key, rsa.RSAPrivateKey):
        raise ConfigurationError("Wrapping private key must be an RSA private key")
    if key_pair.public_key.key_size < min_bits:
        raise ConfigurationError(f"Wrapping key must be at least {min_bits} bits")
    if key_pair.public_key.public_numbers() != key_pair.private_key.public_key().public_numbers():
        raise ConfigurationError("Wrapping public and private keys do not belong to the same pair")


__all__ = ["AsymmetricStaticProvider", "WrappingKeyPair"]
