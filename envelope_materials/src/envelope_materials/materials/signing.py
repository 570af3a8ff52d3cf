"""Static signing credentials.

A provider holds exactly one credential for its lifetime: either a MAC secret,
used as both signing and verification key, or an asymmetric signature key pair.
The two cases are told apart by their ``kind`` tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa

from ..core.exceptions import ConfigurationError

_SIGNING_PRIVATE_KEYS = (
    rsa.RSAPrivateKey,
    ec.EllipticCurvePrivateKey,
    ed25519.Ed25519PrivateKey,
    ed448.Ed448PrivateKey,
    dsa.DSAPrivateKey,
)
_SIGNING_PUBLIC_KEYS = (
    rsa.RSAPublicKey,
    ec.EllipticCurvePublicKey,
    ed25519.Ed25519PublicKey,
    ed448.Ed448PublicKey,
    dsa.DSAPublicKey,
)


class CredentialKind(str, Enum):
    MAC = "mac"
    SIGNATURE = "signature"


@dataclass(frozen=True, slots=True)
class MacSecret:
    secret: bytes = field(repr=False)
    kind: Literal[CredentialKind.MAC] = field(default=CredentialKind.MAC, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (bytes, bytearray)) or not self.secret:
            raise ConfigurationError("MAC secret must be non-empty bytes")
        object.__setattr__(self, "secret", bytes(self.secret))


@dataclass(frozen=True, slots=True)
class SignatureKeyPair:
    private_key: Any = field(repr=False)
    public_key: Any = None
    kind: Literal[CredentialKind.SIGNATURE] = field(default=CredentialKind.SIGNATURE, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.private_key, _SIGNING_PRIVATE_KEYS):
            raise ConfigurationError(
                f"Unsupported signature private key: {type(self.private_key).__name__}"
            )
        if self.public_key is None:
            object.__setattr__(self, "public_key", self.private_key.public_key())
        elif not isinstance(self.public_key, _SIGNING_PUBLIC_KEYS):
            raise ConfigurationError(
                f"Unsupported signature public key: {type(self.public_key).__name__}"
            )
        elif _spki(self.public_key) != _spki(self.private_key.public_key()):
            raise ConfigurationError("Signature public and private keys do not belong to the same pair")


def _spki(public_key: Any) -> bytes:
    return public_key.public_bytes(serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo)


SigningCredential = Union[MacSecret, SignatureKeyPair]


def signing_key(credential: SigningCredential) -> Any:
    if credential.kind is CredentialKind.MAC:
        return credential.secret
    if credential.kind is CredentialKind.SIGNATURE:
        return credential.private_key
    raise ConfigurationError(f"Unsupported signing credential: {credential.kind}")


def verification_key(credential: SigningCredential) -> Any:
    if credential.kind is CredentialKind.MAC:
        return credential.secret
    if credential.kind is CredentialKind.SIGNATURE:
        return credential.public_key
    raise ConfigurationError(f"Unsupported signing credential: {credential.kind}")


__all__ = [
    "CredentialKind",
    "MacSecret",
    "SignatureKeyPair",
    "SigningCredential",
    "signing_key",
    "verification_key",
]
