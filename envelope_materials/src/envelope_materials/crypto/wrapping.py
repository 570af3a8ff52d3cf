"""Key wrapping transforms addressed by their description names.

RSA transforms keep the JCE-style names (``RSA/ECB/...``) that are written to
the ``key-wrapping-alg`` description entry, so descriptions stay readable by
other implementations of the record encryption format.
"""

from __future__ import annotations

from typing import Any, Callable, Final, Mapping

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.keywrap import aes_key_unwrap, aes_key_wrap

from ..core.exceptions import ConfigurationError

RSA_PKCS1: Final[str] = "RSA/ECB/PKCS1Padding"
RSA_OAEP_SHA1: Final[str] = "RSA/ECB/OAEPWithSHA-1AndMGF1Padding"
RSA_OAEP_SHA256: Final[str] = "RSA/ECB/OAEPWithSHA-256AndMGF1Padding"
RSA_OAEP_SHA384: Final[str] = "RSA/ECB/OAEPWithSHA-384AndMGF1Padding"
RSA_OAEP_SHA512: Final[str] = "RSA/ECB/OAEPWithSHA-512AndMGF1Padding"
AES_WRAP: Final[str] = "AESWrap"

AES_WRAP_KEY_SIZES: Final[tuple[int, ...]] = (16, 24, 32)


def _oaep(digest: Callable[[], hashes.HashAlgorithm]) -> Callable[[], padding.AsymmetricPadding]:
    # MGF1 stays on SHA-1 for every OAEP name, as the JCE transforms do.
    def factory() -> padding.AsymmetricPadding:
        return padding.OAEP(mgf=padding.MGF1(algorithm=hashes.SHA1()), algorithm=digest(), label=None)

    return factory


class RsaTransform:
    """RSA encryption of the content key under a public key"""

    __slots__ = ("name", "_padding")

    def __init__(self, name: str, padding_factory: Callable[[], padding.AsymmetricPadding]) -> None:
        self.name = name
        self._padding = padding_factory

    def accepts_wrapping_key(self, key: Any) -> bool:
        return isinstance(key, rsa.RSAPublicKey)

    def accepts_unwrapping_key(self, key: Any) -> bool:
        return isinstance(key, rsa.RSAPrivateKey)

    def wrap(self, key: rsa.RSAPublicKey, plaintext: bytes) -> bytes:
        return key.encrypt(plaintext, self._padding())

    def unwrap(self, key: rsa.RSAPrivateKey, wrapped: bytes) -> bytes:
        return key.decrypt(wrapped, self._padding())


class AesKeyWrapTransform:
    """RFC 3394 AES key wrap under a shared key-encryption key"""

    __slots__ = ("name",)

    def __init__(self, name: str = AES_WRAP) -> None:
        self.name = name

    def accepts_wrapping_key(self, key: Any) -> bool:
        return isinstance(key, (bytes, bytearray)) and len(key) in AES_WRAP_KEY_SIZES

    accepts_unwrapping_key = accepts_wrapping_key

    def wrap(self, key: bytes, plaintext: bytes) -> bytes:
        return aes_key_wrap(bytes(key), plaintext)

    def unwrap(self, key: bytes, wrapped: bytes) -> bytes:
        return aes_key_unwrap(bytes(key), wrapped)


WrappingTransform = RsaTransform | AesKeyWrapTransform

TRANSFORMS: Final[Mapping[str, WrappingTransform]] = {
    RSA_PKCS1: RsaTransform(RSA_PKCS1, padding.PKCS1v15),
    RSA_OAEP_SHA1: RsaTransform(RSA_OAEP_SHA1, _oaep(hashes.SHA1)),
    RSA_OAEP_SHA256: RsaTransform(RSA_OAEP_SHA256, _oaep(hashes.SHA256)),
    RSA_OAEP_SHA384: RsaTransform(RSA_OAEP_SHA384, _oaep(hashes.SHA384)),
    RSA_OAEP_SHA512: RsaTransform(RSA_OAEP_SHA512, _oaep(hashes.SHA512)),
    AES_WRAP: AesKeyWrapTransform(),
}


def get_transform(name: str) -> WrappingTransform:
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise ConfigurationError(f"Unsupported key wrapping algorithm: {name}") from None


def is_rsa_transform(name: str) -> bool:
    return isinstance(TRANSFORMS.get(name), RsaTransform)


def default_transform_for(key: Any, *, rsa_default: str, symmetric_default: str) -> str:
    """Pick the transform used when a description does not name one"""
    if isinstance(key, (rsa.RSAPublicKey, rsa.RSAPrivateKey)):
        return rsa_default
    if isinstance(key, (bytes, bytearray)):
        return symmetric_default
    raise ConfigurationError(f"Unsupported wrapping key type: {type(key).__name__}")


__all__ = [
    "RSA_PKCS1",
    "RSA_OAEP_SHA1",
    "RSA_OAEP_SHA256",
    "RSA_OAEP_SHA384",
    "RSA_OAEP_SHA512",
    "AES_WRAP",
    "AES_WRAP_KEY_SIZES",
    "RsaTransform",
    "AesKeyWrapTransform",
    "WrappingTransform",
    "TRANSFORMS",
    "get_transform",
    "is_rsa_transform",
    "default_transform_for",
]
